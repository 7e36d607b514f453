"""
Decoding of file paths reported by lifecycle messages.

Compilers decorate the paths they report: ``RegularFileObject[/src/A.java]``,
module-qualified output locations such as ``out/m:org/example/A.class``, or
Windows separators. This module turns such fragments into forward-slash paths
and classifies them as sources or generated artifacts.
"""

import re
from dataclasses import dataclass

from ..core.enums import PathKind

WRAPPER_PATTERN = re.compile(r"^\w+\[(.+)\]$", re.IGNORECASE)
PATH_SEPARATORS = ("/", "\\")


@dataclass(frozen=True)
class DecodedPath:
    """A normalized path and its classification."""

    path: str
    kind: PathKind

    @property
    def name(self) -> str:
        return self.path.rsplit("/", 1)[-1]


def unwrap(fragment: str) -> str:
    """Strip a ``word[...]`` decoration, if present."""
    if match := WRAPPER_PATTERN.match(fragment):
        return match.group(1)
    return fragment


def replace_module_separator(path: str) -> str:
    """
    Turn a module separator colon into a slash.

    Only the last colon is considered. A colon followed by a path separator is
    a drive letter and stays untouched.
    """
    index = path.rfind(":")
    if index < 0:
        return path
    following = path[index + 1 : index + 2]
    if following in PATH_SEPARATORS:
        return path
    return f"{path[:index]}/{path[index + 1:]}"


def normalize_path(fragment: str) -> str:
    path = replace_module_separator(unwrap(fragment))
    return path.replace("\\", "/")


def file_extension(path: str) -> str:
    """Extension of the last path component, without the dot; empty if none."""
    name = path.rsplit("/", 1)[-1]
    _, dot, extension = name.rpartition(".")
    return extension if dot else ""


def classify(path: str, source_extension: str, artifact_extension: str) -> PathKind:
    extension = file_extension(path).lower()
    if extension and extension == source_extension.lower():
        return PathKind.SOURCE
    if extension and extension == artifact_extension.lower():
        return PathKind.ARTIFACT
    return PathKind.OTHER


def decode_path(
    fragment: str, source_extension: str = "java", artifact_extension: str = "class"
) -> DecodedPath:
    """Normalize a captured path fragment and classify it."""
    path = normalize_path(fragment)
    return DecodedPath(
        path=path, kind=classify(path, source_extension, artifact_extension)
    )
