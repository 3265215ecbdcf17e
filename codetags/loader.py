"""Reading tag descriptors from yaml, json or toml files."""

import json
import os
import typing
from json import JSONDecodeError

import toml
from ruamel.yaml import YAML

from .errors import DescriptorFileNotFoundError, InvalidDescriptorFormatError, UnsupportedDescriptorFileError

# Recognized descriptor file extensions
DESCRIPTOR_EXTS = [".yml", ".yaml", ".json", ".toml"]


def _parse(data: str, ext: str) -> typing.Any:
    match ext:
        case ".yml" | ".yaml":
            try:
                loader = YAML(typ="safe")
                return loader.load(data)
            except Exception as e:
                # ruamel.yaml does not document which exceptions it throws
                raise InvalidDescriptorFormatError("Invalid file format") from e
        case ".json":
            try:
                return json.loads(data)
            except JSONDecodeError as e:
                raise InvalidDescriptorFormatError("Invalid file format") from e
        case ".toml":
            try:
                return toml.loads(data)
            except toml.TomlDecodeError as e:
                raise InvalidDescriptorFormatError("Invalid file format") from e
        case _:
            raise UnsupportedDescriptorFileError(f"Unsupported file extension {ext}")


def load_descriptors(path: str) -> list:
    """
    Load a list of tag descriptors from a file.

    The file holds either a list of descriptors or a mapping with the list
    under the key ``tags``. TOML files always use the second form, as an
    array of tables ``[[tags]]``.

    Raises:
        DescriptorFileNotFoundError: if the file does not exist.
        UnsupportedDescriptorFileError: if the extension is not recognized.
        InvalidDescriptorFormatError: if the content cannot be parsed or has no list of descriptors.
    """
    _, ext = os.path.splitext(path)
    ext = ext.lower()
    if ext not in DESCRIPTOR_EXTS:
        raise UnsupportedDescriptorFileError(f"Unsupported file extension {ext}")
    if not os.path.isfile(path):
        raise DescriptorFileNotFoundError(f"File {path} not found")
    with open(path, encoding="utf-8") as src:
        content = _parse(src.read(), ext)
    if isinstance(content, dict):
        content = content.get("tags")
    if not isinstance(content, list):
        raise InvalidDescriptorFormatError(f"No list of tag descriptors found in {path}")
    return content
