"""Kinds of failure an install operation can report."""

from enum import Enum


class FailureKind(str, Enum):
    """Error taxonomy; every kind is surfaced as an outcome, none is fatal."""

    INVALID_INPUT = "invalid_input"
    HOST_UNKNOWN = "host_unknown"
    HOST_NOT_INSTALLED = "host_not_installed"
    CONFIG_FILE_NOT_FOUND = "config_file_not_found"
    CONFIG_PARSE_ERROR = "config_parse_error"
    CONFIG_WRITE_ERROR = "config_write_error"
    RUNTIME_MISSING = "runtime_missing"
    PACKAGE_NOT_FOUND = "package_not_found"
    LOCAL_PATH_NOT_FOUND = "local_path_not_found"
    NO_MANIFEST = "no_manifest"
    INSTALL_FAILED = "install_failed"
    NO_EXECUTABLES_FOUND = "no_executables_found"
    SERVER_NOT_FOUND = "server_not_found"
    UNEXPECTED = "unexpected"
