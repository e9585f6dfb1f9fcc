from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Union

from .diagnostics import Diagnostics
from .document import SBase
from .model import Summation
from .notes_fmt import join_segments, notes_envelope, sanitize

Sanitizer = Callable[..., str]

EVENT_LIST_PREAMBLE = (
    "This model was created from a list of events NOT a pathway. "
    "An appropriate parent pathway could not be detected. Events include:"
)


@dataclass(frozen=True)
class Attached:
    fragment: ET.Element


@dataclass(frozen=True)
class SkippedMalformed:
    reason: str
    content: str


@dataclass(frozen=True)
class SkippedEmpty:
    pass


NotesOutcome = Union[Attached, SkippedMalformed, SkippedEmpty]


class NotesBuilder:
    """Collect sanitized text segments and attach them as one notes block.

    One builder per description request: append any number of segments, then
    call `finalize()` exactly once.
    """

    def __init__(
        self,
        target: SBase,
        *,
        strict: bool = True,
        diagnostics: Optional[Diagnostics] = None,
        sanitizer: Sanitizer = sanitize,
    ) -> None:
        self.target = target
        self.strict = strict
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self._sanitize = sanitizer
        self._segments: list[str] = []
        self._finalized = False

    @property
    def segments(self) -> tuple[str, ...]:
        return tuple(self._segments)

    @property
    def contents(self) -> str:
        return join_segments(self._segments)

    def append(self, text: Optional[str]) -> None:
        if self._finalized:
            raise RuntimeError("notes already finalized")
        if text is None:
            return
        self._segments.append(self._sanitize(text, strict=self.strict))

    def extend(self, texts: Iterable[Optional[str]]) -> None:
        for text in texts:
            self.append(text)

    def append_summations(self, summations: Optional[Iterable[Summation]]) -> bool:
        """Append each summation text; True if at least one was added."""
        appended = False
        for summation in summations or []:
            if summation.text is None:
                continue
            self.append(summation.text)
            appended = True
        return appended

    def append_event_list_preamble(self) -> None:
        self.append(EVENT_LIST_PREAMBLE)

    def finalize(self) -> NotesOutcome:
        if self._finalized:
            raise RuntimeError("notes already finalized")
        self._finalized = True

        if not self._segments:
            return SkippedEmpty()

        notes = notes_envelope(self.contents)
        try:
            fragment = ET.fromstring(notes)
        except ET.ParseError as e:
            self.diagnostics.warn(
                "W_NOTES_MALFORMED",
                f"notes for {self.target.id!r} are not well-formed ({e}); "
                f"skipping: {notes}",
                path=self.target.id,
            )
            return SkippedMalformed(reason=str(e), content=notes)

        self.target.append_notes(fragment)
        return Attached(fragment=fragment)
