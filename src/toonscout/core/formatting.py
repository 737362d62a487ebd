"""Formatting layer: turns a toon status document into Discord message text.

Every function here is pure: it takes a ``Toon`` (or one of its tasks) and
returns a string ready to drop into an interaction reply. Missing tracks
and empty task slots are ordinary outcomes and come back as text, never
as exceptions.
"""

from __future__ import annotations

import logging

from toonscout.models.constants import GAG_TRACKS, INDENT
from toonscout.models.toon import Task, Toon

logger = logging.getLogger(__name__)


# --- Laff & location ---


def format_laff(toon: Toon) -> str:
    """Return laff as ``current/max``."""
    return f"{toon.laff.current}/{toon.laff.max}"


def format_location(toon: Toon) -> str:
    """Return ``district, zone`` plus the neighborhood when it differs from the zone."""
    loc = toon.location
    msg = f"{loc.district}, {loc.zone}"
    if loc.zone != loc.neighborhood:
        msg += f", {loc.neighborhood}"
    return msg


# --- Gags ---


def format_gag_info(toon: Toon, track: str | None = None) -> str:
    """Describe one gag track, or summarise every track the toon owns.

    With *track*, reports whether the track is missing, maxed, or how much
    experience is left until the next gag. Without it, lists the current
    gag of each owned track in canonical order, headed by the toon's max
    laff and its organic track. Only the first organic track found is shown.
    """
    if track:
        progress = toon.gag_track(track)
        if progress is None:
            return f"{toon.name} does not have the {track} track."
        if progress.maxed:
            return f"{toon.name} has **maxed** the {track} track."
        return (
            f"{toon.name} has **{progress.experience.current}/{progress.experience.next}** "
            f"left to earn {progress.gag.name}, the next {track} gag."
        )

    gag_names: list[str] = []
    organic_track: str | None = None
    for name in GAG_TRACKS:
        progress = toon.gag_track(name)
        if progress is None:
            continue
        gag_names.append(progress.gag.name)
        if organic_track is None and progress.organic:
            organic_track = name

    if organic_track is None:
        organic = f"{INDENT}No organic track.\n{INDENT}"
    else:
        organic = f"{INDENT}Organic {organic_track}\n{INDENT}"

    header = f"**{toon.name}**'s gags with {toon.laff.max} laff:\n"
    return header + organic + ", ".join(gag_names)


# --- Tasks ---


def format_tasks(toon: Toon, index: int | None = None) -> str:
    """Describe the task in slot *index* (1-based), or list every task.

    An index of None or 0 means "all tasks". Slots outside
    ``1..len(toon.tasks)`` get a "no task in slot" reply.
    """
    if index:
        if index < 1 or index > len(toon.tasks):
            return f"{toon.name} has no task in slot {index}."
        task = toon.tasks[index - 1]
        deletable = " Just for Fun" if task.deletable else ""
        return f"**{toon.name}'s**{deletable} task {index}:\n{INDENT}{render_task_detailed(task)}"

    if not toon.tasks:
        return f"**{toon.name}** has no tasks."

    lines = []
    for i, task in enumerate(toon.tasks, start=1):
        deletable = " _Just for Fun_" if task.deletable else ""
        lines.append(f"{INDENT}Task **{i}:** {render_task_simple(task)}{deletable}\n")
    return f"**{toon.name}** is working on:\n" + "".join(lines)


def render_task_detailed(task: Task) -> str:
    """Multi-line objective/progress (or destination) and reward for one task."""
    logger.debug("render_task_detailed task=%r", task)
    if task.is_visit:
        lines = [
            f"**Objective:** Visit {task.to.name} in {task.to.building}",
            f"**Location:** {task.to.zone}, {task.to.neighborhood}",
            f"**Reward:** {task.reward}",
        ]
    else:
        lines = [
            f"**Objective:** {task.objective.text}",
            f"**Progress:** {task.objective.progress.text}",
            f"**Reward:** {task.reward}",
        ]
    return f"\n{INDENT}".join(lines)


def render_task_simple(task: Task) -> str:
    """One-line summary of a task."""
    if task.is_visit:
        return f"Visit {task.to.building} on {task.to.zone}, {task.to.neighborhood}"
    return f"{task.objective.text} ({task.objective.progress.text})"
