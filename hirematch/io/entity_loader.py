from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, List, TypeVar, Union

from hirematch.log import get_logger
from hirematch.models import Application, CandidateProfile, JobPosting, ValidationError
from hirematch.session import EntityKind

log = get_logger(__name__)

T = TypeVar("T")


def _documents(data: Any, kind: EntityKind) -> List[Any]:
    """
    A snapshot is either a bare list of documents or an export envelope
    like {"jobs": [...]} / {"candidates": [...]}.
    """
    if isinstance(data, list):
        return data
    if isinstance(data, dict) and isinstance(data.get(kind.value), list):
        return data[kind.value]
    raise ValidationError(f"Expected a list of {kind.value} or a {{'{kind.value}': [...]}} object")


def _parse_all(docs: List[Any], factory: Callable[[Any], T], kind: EntityKind) -> List[T]:
    out: List[T] = []
    for idx, doc in enumerate(docs):
        if not isinstance(doc, dict):
            raise ValidationError(f"{kind.value}[{idx}]: expected an object, got {type(doc).__name__}")
        try:
            out.append(factory(doc))
        except KeyError as exc:
            raise ValidationError(f"{kind.value}[{idx}]: missing field {exc.args[0]!r}") from None
        except (TypeError, ValidationError) as exc:
            raise ValidationError(f"{kind.value}[{idx}]: {exc}") from None
    return out


def parse_jobs(data: Any) -> List[JobPosting]:
    return _parse_all(_documents(data, EntityKind.JOBS), JobPosting.from_dict, EntityKind.JOBS)


def parse_candidates(data: Any) -> List[CandidateProfile]:
    return _parse_all(_documents(data, EntityKind.CANDIDATES), CandidateProfile.from_dict, EntityKind.CANDIDATES)


def parse_applications(data: Any) -> List[Application]:
    return _parse_all(_documents(data, EntityKind.APPLICATIONS), Application.from_dict, EntityKind.APPLICATIONS)


def load_entities(path: Union[str, Path], kind: EntityKind) -> List[Any]:
    p = Path(path)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValidationError(f"{p}: invalid JSON ({exc.msg} at line {exc.lineno})") from None

    parsers = {
        EntityKind.JOBS: parse_jobs,
        EntityKind.CANDIDATES: parse_candidates,
        EntityKind.APPLICATIONS: parse_applications,
    }
    kind = EntityKind(kind)
    entities = parsers[kind](data)
    log.info("Loaded %d %s from %s", len(entities), kind.value, p)
    return entities
