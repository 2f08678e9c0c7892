"""Centralized exit codes for the env2tf CLI."""


class ExitCodes:
    """Standard exit codes for env2tf commands."""

    SUCCESS = 0

    IO_FAILURE = 1

    USAGE_ERROR = 2

    @classmethod
    def get_description(cls, code: int) -> str:
        """Get human-readable description for an exit code."""
        descriptions = {
            cls.SUCCESS: "Success - Terraform files written",
            cls.IO_FAILURE: "An input file could not be read or an output file could not be written",
            cls.USAGE_ERROR: "Invalid command line usage",
        }
        return descriptions.get(code, f"Unknown exit code: {code}")
