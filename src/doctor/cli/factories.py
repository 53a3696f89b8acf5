from pathlib import Path
from typing import Optional

import typer

from doctor.common import bus
from doctor.config import ConfigError, DoctorConfig, load_config_from_path
from doctor.parser import DocCommentParser, DocCommentSerializer
from doctor.syntax import DocCommentParserProtocol, DocCommentSerializerProtocol


def get_project_root() -> Path:
    return Path.cwd()


def make_config(root: Optional[Path] = None) -> DoctorConfig:
    try:
        return load_config_from_path(root or get_project_root())
    except ConfigError as e:
        bus.error("config.error", error=e)
        raise typer.Exit(code=1)


def make_parser() -> DocCommentParserProtocol:
    return DocCommentParser()


def make_serializer() -> DocCommentSerializerProtocol:
    return DocCommentSerializer()
