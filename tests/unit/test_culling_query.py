from ediscovery.culling.query import CullingQuery


class TestCullingQueryParse:
    def test_none_is_empty(self) -> None:
        assert CullingQuery.parse(None).is_empty

    def test_blank_string_is_empty(self) -> None:
        query = CullingQuery.parse("\n  \n\t\n")
        assert query.is_empty
        assert query.to_query_string() == ""

    def test_splits_on_newlines(self) -> None:
        assert CullingQuery.parse("apple\nbanana").terms == ("apple", "banana")

    def test_skips_blank_lines_and_strips(self) -> None:
        assert CullingQuery.parse(" apple \r\n\r\nbig banana\n").terms == ("apple", "big banana")


class TestCullingQueryString:
    def test_single_term(self) -> None:
        assert CullingQuery(terms=("apple",)).to_query_string() == "apple"

    def test_terms_are_ored(self) -> None:
        query = CullingQuery.parse("apple\nbig banana\n\"cherry pie\"")
        assert query.to_query_string() == 'apple OR big banana OR "cherry pie"'
