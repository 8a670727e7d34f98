"""Expansion of wildcard placement rules against an archive file list."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from lip_core.path import ToothPath

from .metadata import WILDCARD, Metadata, PlacementRule

logger = logging.getLogger(__name__)


def resolve_placement(
    rules: Iterable[PlacementRule],
    candidate_paths: Sequence[ToothPath],
) -> list[PlacementRule]:
    """Replace every ``src: "<prefix>*"`` rule with one rule per matching file.

    Literal rules are kept in place. A wildcard rule expands, at its own
    position, to ``{src: candidate, dest: dest / (candidate - prefix)}`` for
    each candidate under ``prefix``, in candidate order. A wildcard that
    matches nothing contributes no rules.
    """
    resolved: list[PlacementRule] = []
    for rule in rules:
        if not rule.is_wildcard:
            resolved.append(rule)
            continue

        source_prefix = ToothPath.parse(rule.src[: -len(WILDCARD)])
        dest_prefix = ToothPath.parse(rule.dest)

        matched = 0
        for candidate in candidate_paths:
            if not candidate.has_prefix(source_prefix):
                continue
            relative = candidate.trim_prefix(source_prefix)
            resolved.append(
                PlacementRule(src=candidate.as_posix(), dest=dest_prefix.join(relative).as_posix())
            )
            matched += 1
        logger.debug("wildcard expanded src=%s dest=%s matches=%s", rule.src, rule.dest, matched)
    return resolved


def populate_wildcards(metadata: Metadata, candidate_paths: Sequence[ToothPath]) -> Metadata:
    return metadata.with_files_place(resolve_placement(metadata.files_place, candidate_paths))
