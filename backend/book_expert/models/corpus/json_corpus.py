from __future__ import annotations
from pathlib import Path
from typing import Any, List
import json
import logging

from book_expert.core.entities import Answer, Citation
from book_expert.core.errors import CorpusValidationError
from book_expert.models.corpus.static_corpus import StaticAnswerCorpus

logger = logging.getLogger("book_expert.corpus")


def _require_str(obj: dict, key: str, answer_id: str | None = None, allow_empty: bool = False) -> str:
    v = obj.get(key, "" if allow_empty else None)
    if not isinstance(v, str) or (not allow_empty and not v):
        raise CorpusValidationError(f"field {key!r} must be a non-empty string", answer_id)
    return v


def _map_citation(obj: Any, answer_id: str) -> Citation:
    if not isinstance(obj, dict):
        raise CorpusValidationError("citation must be an object", answer_id)
    return Citation(
        uri=_require_str(obj, "uri", answer_id),
        name=_require_str(obj, "name", answer_id),
        description=_require_str(obj, "description", answer_id, allow_empty=True),
    )


def _map_record(obj: Any) -> Answer:
    if not isinstance(obj, dict):
        raise CorpusValidationError("answer record must be an object")
    answer_id = _require_str(obj, "id")

    keywords = obj.get("keywords", [])
    if not isinstance(keywords, list) or not all(isinstance(k, str) for k in keywords):
        raise CorpusValidationError("keywords must be a list of strings", answer_id)

    citations = obj.get("citations", [])
    if not isinstance(citations, list):
        raise CorpusValidationError("citations must be a list", answer_id)

    # accept the camelCase spelling used by hand-written corpus files
    verbatim = obj.get("verbatim_check", obj.get("verbatimCheck"))
    if not isinstance(verbatim, str):
        raise CorpusValidationError("field 'verbatim_check' must be a string", answer_id)

    return Answer(
        id=answer_id,
        keywords=tuple(keywords),
        text=_require_str(obj, "text", answer_id),
        verbatim_check=verbatim,
        citations=tuple(_map_citation(c, answer_id) for c in citations),
    )


def load_json_corpus(path: str | Path) -> StaticAnswerCorpus:
    """
    Load a corpus from a JSON document of the form
    ``{"answers": [...], "fallback": {...}}``.

    The order of ``answers`` in the file is the registration order.
    """
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise CorpusValidationError(f"{p}: invalid JSON ({e.msg} at line {e.lineno})") from e
    except UnicodeDecodeError as e:
        raise CorpusValidationError(f"{p}: not valid UTF-8 ({e.reason} at byte {e.start})") from e
    except OSError as e:
        raise CorpusValidationError(f"{p}: cannot read corpus file ({e.strerror or e})") from e

    if not isinstance(data, dict):
        raise CorpusValidationError(f"{p}: top-level value must be an object")
    records = data.get("answers")
    if not isinstance(records, list):
        raise CorpusValidationError(f"{p}: 'answers' must be a list")
    if "fallback" not in data:
        raise CorpusValidationError(f"{p}: 'fallback' answer is required")

    answers: List[Answer] = [_map_record(obj) for obj in records]
    corpus = StaticAnswerCorpus(answers, fallback=_map_record(data["fallback"]))
    logger.info(f"📂 Loaded corpus from {p}: {len(corpus)} answers, {corpus.citation_count} citations")
    return corpus
