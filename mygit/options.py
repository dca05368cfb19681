"""Command-line options of the individual commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence

from .errors import MyGitError
from .object_type import ObjectType


def _unknown(command: str, arg: str) -> MyGitError:
    return MyGitError(f"Unknown option to command '{command}': {arg}")


def _is_option(arg: str) -> bool:
    return arg.startswith("-")


def _take(args: Iterator[str], count: int) -> tuple[str, ...] | None:
    """The next ``count`` arguments, or None (consuming nothing useful) if too few."""
    taken = tuple(value for _, value in zip(range(count), args))
    return taken if len(taken) == count else None


@dataclass
class HashObjectOptions:
    """Options of ``hash-object``."""

    params: list[str] = field(default_factory=list)
    type: ObjectType = ObjectType.BLOB
    write: bool = False

    @classmethod
    def parse(cls, args: Sequence[str]) -> "HashObjectOptions":
        opts = cls()
        remaining = iter(args)
        for arg in remaining:
            if not _is_option(arg):
                opts.params.append(arg)
            elif arg == "--write":
                opts.write = True
            elif arg == "--type" and (value := _take(remaining, 1)) is not None:
                opts.type = ObjectType.parse(value[0])
            else:
                raise _unknown("hash-object", arg)
        if not opts.params:
            raise MyGitError("You have to specify a hash to hash-object.")
        return opts


@dataclass
class CatFileOptions:
    """Options of ``cat-file``."""

    first_param: str = ""
    size: bool = False
    type: bool = False
    content: bool = False
    raw: bool = False

    _FLAGS = {"-s": "size", "-t": "type", "-p": "content", "-r": "raw"}

    @classmethod
    def parse(cls, args: Sequence[str]) -> "CatFileOptions":
        opts = cls()
        for arg in args:
            if not _is_option(arg):
                opts.first_param = arg
            elif arg in cls._FLAGS:
                setattr(opts, cls._FLAGS[arg], True)
            else:
                raise _unknown("cat-file", arg)
        if not opts.first_param:
            raise MyGitError("You have to specify a hash to cat-file.")
        return opts


@dataclass
class AddOptions:
    """Options of ``add``."""

    paths: list[str] = field(default_factory=list)
    force: bool = False

    @classmethod
    def parse(cls, args: Sequence[str]) -> "AddOptions":
        opts = cls()
        for arg in args:
            if not _is_option(arg):
                opts.paths.append(arg)
            elif arg == "-f":
                opts.force = True
            else:
                raise _unknown("add", arg)
        if not opts.paths:
            raise MyGitError("You have to specify path arguments to add.")
        return opts


@dataclass
class CommitOptions:
    """Options of ``commit``."""

    message: str = ""

    @classmethod
    def parse(cls, args: Sequence[str]) -> "CommitOptions":
        opts = cls()
        remaining = iter(args)
        for arg in remaining:
            if arg == "-m" and (value := _take(remaining, 1)) is not None:
                opts.message = value[0]
            else:
                raise _unknown("commit", arg)
        return opts


@dataclass
class LogOptions:
    """Options of ``log``; it currently takes none and ignores its arguments."""

    @classmethod
    def parse(cls, args: Sequence[str]) -> "LogOptions":
        return cls()


@dataclass
class BranchOptions:
    """Options of ``branch``."""

    display: bool = False
    create: str = ""
    delete: str = ""

    @classmethod
    def parse(cls, args: Sequence[str]) -> "BranchOptions":
        opts = cls(display=not args)
        remaining = iter(args)
        for arg in remaining:
            if not _is_option(arg):
                opts.create = arg
            elif arg == "-d" and (value := _take(remaining, 1)) is not None:
                opts.delete = value[0]
            else:
                raise _unknown("branch", arg)
        return opts


@dataclass
class CheckoutOptions:
    """Options of ``checkout``."""

    display: bool = False
    target: str = ""

    @classmethod
    def parse(cls, args: Sequence[str]) -> "CheckoutOptions":
        opts = cls(display=not args)
        for arg in args:
            if not _is_option(arg):
                opts.target = arg
            else:
                raise _unknown("checkout", arg)
        return opts


@dataclass
class ConfigOptions:
    """Options of ``config``."""

    local: bool = True
    is_global: bool = False
    add: tuple[str, str] | None = None
    unset: str = ""
    get: str = ""

    @classmethod
    def parse(cls, args: Sequence[str]) -> "ConfigOptions":
        opts = cls()
        remaining = iter(args)
        for arg in remaining:
            if arg == "--local":
                opts.local, opts.is_global = True, False
            elif arg == "--global":
                opts.local, opts.is_global = False, True
            elif arg == "--add" and (pair := _take(remaining, 2)) is not None:
                opts.add = (pair[0], pair[1])
            elif arg == "--unset" and (value := _take(remaining, 1)) is not None:
                opts.unset = value[0]
            elif arg == "--get" and (value := _take(remaining, 1)) is not None:
                opts.get = value[0]
            else:
                raise _unknown("config", arg)
        return opts


@dataclass
class MergeOptions:
    """Options of ``merge``."""

    branch: str = ""

    @classmethod
    def parse(cls, args: Sequence[str]) -> "MergeOptions":
        opts = cls()
        for arg in args:
            if not _is_option(arg):
                opts.branch = arg
            else:
                raise _unknown("merge", arg)
        return opts