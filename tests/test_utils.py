"""Tests for faithful utility modules."""


class TestLogger:
    """Tests for logger module."""

    def test_get_logger(self) -> None:
        from faithful.utils.logger import get_logger

        logger = get_logger("mymodule")
        assert logger.name == "faithful.mymodule"

    def test_logger_with_faithful_prefix(self) -> None:
        from faithful.utils.logger import get_logger

        logger = get_logger("faithful.renderers.faithful")
        assert logger.name == "faithful.renderers.faithful"

    def test_logger_name_starting_with_faithful_not_submodule(self) -> None:
        """Names starting with 'faithful' but not submodules should get prefix."""
        from faithful.utils.logger import get_logger

        logger = get_logger("faithful_other")
        assert logger.name == "faithful.faithful_other"

    def test_logger_exact_faithful_name(self) -> None:
        from faithful.utils.logger import get_logger

        assert get_logger("faithful").name == "faithful"


class TestStringBuilder:
    """Tests for the default sink."""

    def test_append_and_build(self) -> None:
        from faithful.stringbuilder import StringBuilder

        sb = StringBuilder()
        sb.append("a").append("").append("b")
        assert sb.build() == "ab"
        assert len(sb) == 2

    def test_write_returns_length(self) -> None:
        from faithful.stringbuilder import StringBuilder

        sb = StringBuilder()
        assert sb.write("foo") == 3
        assert sb.write("") == 0
        assert sb.build() == "foo"

    def test_clear(self) -> None:
        from faithful.stringbuilder import StringBuilder

        sb = StringBuilder().append("x")
        assert sb
        assert not sb.clear()

    def test_is_text_sink(self) -> None:
        import io

        from faithful.protocols import TextSink
        from faithful.stringbuilder import StringBuilder

        assert isinstance(StringBuilder(), TextSink)
        assert isinstance(io.StringIO(), TextSink)
