"""
Tests for the server entry point.
"""

from chuk_mcp_modes.server import build_parser


class TestServerArgs:
    """Tests for command-line parsing."""

    def test_defaults(self) -> None:
        """stdio on port 8000 without debug by default."""
        args = build_parser().parse_args([])
        assert args.transport == "stdio"
        assert args.port == 8000
        assert not args.debug

    def test_http(self) -> None:
        """HTTP transport with a custom port."""
        args = build_parser().parse_args(["--transport", "http", "--port", "9000", "--debug"])
        assert args.transport == "http"
        assert args.port == 9000
        assert args.debug
