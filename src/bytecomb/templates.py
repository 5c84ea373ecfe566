"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from bytecomb.enums import FailureReason


class ErrorTemplate:
    """Centralized error message templates.

    All exception messages are created here. NO f-strings in exception constructors!
    Parse failures never go through this class: they carry a static
    FailureReason instead of a formatted message.
    """

    @staticmethod
    def parse_failed(reason: FailureReason) -> str:
        """Top-level parse() did not match.

        Args:
            reason: Failure reason reported by the outermost parser

        Returns:
            Error message
        """
        return f"Parse failed: {reason}"

    @staticmethod
    def no_progress(combinator: str) -> str:
        """Repeated parser succeeded without consuming input.

        Args:
            combinator: Name of the repeating combinator

        Returns:
            Error message
        """
        return (
            f"{combinator}: inner parser succeeded without consuming input; "
            "repeating it would never terminate"
        )

    @staticmethod
    def forward_undefined(name: str) -> str:
        """Forward parser applied before define().

        Args:
            name: Forward parser name

        Returns:
            Error message
        """
        return f"Forward parser '{name}' used before define() was called"

    @staticmethod
    def forward_redefined(name: str) -> str:
        """Forward parser defined twice.

        Args:
            name: Forward parser name

        Returns:
            Error message
        """
        return f"Forward parser '{name}' is already defined"

    @staticmethod
    def input_too_large(size: int, limit: int) -> str:
        """Input exceeds the configured size limit.

        Args:
            size: Input size in bytes
            limit: Configured maximum in bytes

        Returns:
            Error message
        """
        return (
            f"Input size ({size:,} bytes) exceeds maximum ({limit:,} bytes). "
            "Pass max_input_size to increase the limit or 0 to disable it."
        )

    @staticmethod
    def unexpected_eof(position: int) -> str:
        """Cursor read past the end of its window.

        Args:
            position: Cursor position

        Returns:
            Error message
        """
        return f"Unexpected EOF at position {position}"

    @staticmethod
    def invalid_window(pos: int, end: int, size: int) -> str:
        """Cursor bounds outside the source buffer.

        Args:
            pos: Requested start position
            end: Requested end position
            size: Source buffer length

        Returns:
            Error message
        """
        return f"Invalid cursor window [{pos}, {end}) for source of {size} bytes"


__all__ = ["ErrorTemplate"]
