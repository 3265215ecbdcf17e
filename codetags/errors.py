"""Exceptions raised by codetags."""

DEFAULT_INSTANCE_NAME = "CODETAGS"


class CodetagsException(Exception):
    """General exception when dealing with codetags."""

    pass


class InvalidArgumentError(CodetagsException, ValueError):
    """Error when an instance name is not acceptable."""

    pass


class DescriptorFileNotFoundError(CodetagsException):
    """Error when a descriptor file is not found."""

    pass


class UnsupportedDescriptorFileError(CodetagsException):
    """Error when a descriptor file has an unsupported extension."""

    pass


class InvalidDescriptorFormatError(CodetagsException):
    """Error when parsing a yaml/toml/json descriptor file fails."""

    pass
