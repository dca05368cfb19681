"""Local and per-user configuration files of ``[section]`` / ``key = value`` lines."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from .errors import MyGitError
from .repository import DB_NAME, Repository, global_config_path

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"
_FORMAT_ERROR = 'Wrong format of given value : expecting "variable.key value"'


def strip_padding(text: str) -> str:
    """Remove spaces and tabs from both ends of ``text``."""
    return text.strip(" \t")


def parse_config(contents: str) -> dict[str, dict[str, str]]:
    """Read configuration text into ``{section: {key: value}}``.

    Whitespace in keys is dropped, values are stripped of padding and keys
    that appear before any section are ignored.
    """
    values: dict[str, dict[str, str]] = {}
    section: dict[str, str] | None = None
    for line in contents.split("\n"):
        stripped = line.lstrip(" \t")
        if stripped.startswith("["):
            name = stripped[1:].split("]", 1)[0]
            if name:
                values[name] = {}
                section = values[name]
            else:
                section = None
            continue
        key_part, _, value_part = line.partition("=")
        key = key_part.replace(" ", "").replace("\t", "")
        if not key or section is None:
            continue
        section[key] = strip_padding(value_part.replace("=", ""))
    return values


def render_config(values: Mapping[str, Mapping[str, str]]) -> str:
    """Write ``{section: {key: value}}`` back as configuration text, sorted."""
    parts: list[str] = []
    for section in sorted(values):
        parts.append(f"[{section}]\n")
        for key, value in sorted(values[section].items()):
            parts.append(f"\t{key} = {value}\n")
    return "".join(parts)


def _split_name(name: str) -> tuple[str, str]:
    section, dot, key = name.partition(".")
    if not dot:
        raise MyGitError(_FORMAT_ERROR)
    return section, key


@dataclass
class Config:
    """Access to the repository's local configuration and the per-user one."""

    repo: Repository | None = None
    global_path: Path | None = None
    db_name: str = DB_NAME

    def path(self, local: bool) -> Path:
        """The file read and written for the local or the global configuration."""
        if local:
            if self.repo is not None:
                return self.repo.local_config_path
            return Path(self.db_name) / "config"
        if self.global_path is not None:
            return Path(self.global_path)
        return global_config_path(self.db_name)

    def _load(self, local: bool) -> dict[str, dict[str, str]]:
        try:
            text = self.path(local).read_bytes().decode(_ENCODING, _ERRORS)
        except OSError:
            text = ""
        return parse_config(text)

    def _save(self, local: bool, values: Mapping[str, Mapping[str, str]]) -> None:
        target = self.path(local)
        try:
            target.write_bytes(render_config(values).encode(_ENCODING, _ERRORS))
        except OSError as exc:
            raise MyGitError(f"Cannot write configuration file '{target}'.") from exc

    def add(self, local: bool, key: str, value: str) -> None:
        """Set ``section.key`` to ``value``."""
        section, name = _split_name(key)
        values = self._load(local)
        values.setdefault(section, {})[name] = value
        self._save(local, values)

    def unset(self, local: bool, name: str) -> None:
        """Remove ``section.key``, or a whole section when no dot is given."""
        values = self._load(local)
        section, dot, key = name.partition(".")
        if dot:
            values.setdefault(section, {}).pop(key, None)
        else:
            values.pop(name, None)
        self._save(local, values)

    def get(self, local: bool, name: str) -> str:
        """The value of ``section.key``, or an empty string."""
        section, key = _split_name(name)
        return self._load(local).get(section, {}).get(key, "")

    def lookup(self, name: str) -> str:
        """The local value of ``section.key`` if set, otherwise the global one."""
        return self.get(True, name) or self.get(False, name)