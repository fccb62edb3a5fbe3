"""
Per-format decoders for configuration files.

A decoder turns one file into a plain value tree (dicts, lists and scalars).
Decoders are selected by file extension through a DecoderRegistry; the merge
and lookup code never looks at file contents itself.
"""

import configparser
import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

import yaml

from configpath.core.exceptions import DecodeError

logger = logging.getLogger(__name__)

Decoder = Callable[..., Any]


def decode_yaml(path: Path, Loader=yaml.SafeLoader) -> Any:
    """
    Decode a YAML file.

    The safe loader is used unless another Loader is passed through
    driver_args. Passing yaml.Loader or yaml.UnsafeLoader lets the file
    construct arbitrary Python objects; only do so for trusted files.
    """
    with open(path, 'r', encoding='utf-8') as f:
        return yaml.load(f, Loader=Loader)


def decode_json(path: Path, **kwargs) -> Any:
    """Decode a JSON file."""
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f, **kwargs)


def decode_ini(path: Path, **kwargs) -> Dict[str, Any]:
    """
    Decode an INI file with configparser.

    Each section becomes a mapping of its options. Keys from the DEFAULT
    section are folded into every section (configparser semantics) and are
    also exposed at the top level.
    """
    parser = configparser.ConfigParser(**kwargs)
    with open(path, 'r', encoding='utf-8') as f:
        parser.read_file(f)

    data: Dict[str, Any] = dict(parser.defaults())
    for section in parser.sections():
        data[section] = dict(parser.items(section))
    return data


def decode_toml(path: Path, **kwargs) -> Dict[str, Any]:
    """Decode a TOML file with tomllib."""
    with open(path, 'rb') as f:
        return tomllib.load(f, **kwargs)


class DecoderRegistry:
    """
    Registry of named decoders keyed by file extension.

    Formats are kept in registration order, which is the order they are
    tried in when extension matching is disabled.
    """

    def __init__(self):
        self._decoders: Dict[str, Decoder] = {}
        self._extensions: Dict[str, Tuple[str, ...]] = {}

    def register(self, name: str, extensions: Iterable[str], decoder: Decoder):
        """
        Register (or replace) a decoder for a format.

        Args:
            name: Format name, e.g. 'yaml'
            extensions: File extensions handled by the decoder, e.g. ['.yml', '.yaml']
            decoder: Callable taking a Path plus keyword arguments, returning a value tree
        """
        exts = tuple(
            (ext if ext.startswith('.') else f'.{ext}').lower()
            for ext in extensions
        )
        self._decoders[name] = decoder
        self._extensions[name] = exts

    @property
    def formats(self) -> List[str]:
        """Registered format names, in registration order."""
        return list(self._decoders)

    def extensions(self, name: str) -> Tuple[str, ...]:
        return self._extensions[name]

    def format_for(self, path) -> str:
        """
        Get the format name for a file based on its extension.

        Raises:
            DecodeError: If no registered format handles the extension
        """
        suffix = Path(path).suffix.lower()
        for name, exts in self._extensions.items():
            if suffix in exts:
                return name
        raise DecodeError(path, f"no decoder registered for extension '{suffix}'")

    def decoder_for(self, path) -> Decoder:
        return self._decoders[self.format_for(path)]

    def decode(self, path, use_ext: bool = True,
               force_decoders: Optional[List[str]] = None,
               driver_args: Optional[Dict[str, Dict[str, Any]]] = None) -> Any:
        """
        Decode a single file.

        Args:
            path: File to decode
            use_ext: Select the decoder from the file extension. When False,
                     every candidate is tried and the first one producing a
                     mapping wins.
            force_decoders: Restrict candidates to these format names, in order
            driver_args: Per-format keyword arguments passed to the decoder
                         (e.g. {'yaml': {'Loader': yaml.BaseLoader}})

        Returns:
            Decoded value tree

        Raises:
            DecodeError: If the file cannot be read or decoded
        """
        path = Path(path)
        driver_args = driver_args or {}

        if force_decoders:
            unknown = [name for name in force_decoders if name not in self._decoders]
            if unknown:
                raise DecodeError(path, f"unknown decoder(s): {', '.join(unknown)}")
            candidates = list(force_decoders)
        else:
            candidates = self.formats

        if use_ext:
            name = self.format_for(path)
            if name not in candidates:
                raise DecodeError(path, f"decoder '{name}' is not enabled")
            return self._run(name, path, driver_args.get(name, {}))

        failures = []
        for name in candidates:
            try:
                value = self._run(name, path, driver_args.get(name, {}))
            except DecodeError as e:
                failures.append(f"{name}: {e.__cause__ or e}")
                continue
            if isinstance(value, dict):
                return value
            failures.append(f"{name}: top level is {type(value).__name__}, not a mapping")

        raise DecodeError(path, "no decoder could read the file (" + '; '.join(failures) + ")")

    def _run(self, name: str, path: Path, kwargs: Dict[str, Any]) -> Any:
        logger.debug(f"Decoding {path} as {name}")
        try:
            return self._decoders[name](path, **kwargs)
        except Exception as e:
            raise DecodeError(path, f"{name} decode failed: {e}") from e


def default_registry() -> DecoderRegistry:
    """Create a registry with the YAML, JSON, INI and TOML decoders."""
    registry = DecoderRegistry()
    registry.register('yaml', ['.yaml', '.yml'], decode_yaml)
    registry.register('json', ['.json'], decode_json)
    registry.register('ini', ['.ini', '.cfg'], decode_ini)
    registry.register('toml', ['.toml'], decode_toml)
    return registry
