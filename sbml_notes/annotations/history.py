from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from ..constants import DATETIME_FORMAT
from ..document import Creator, History
from ..model import Event, InstanceEdit, Person


def parse_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse a database timestamp; anything unparseable becomes None."""
    if not isinstance(value, str):
        return None
    try:
        return datetime.strptime(value.strip(), DATETIME_FORMAT)
    except ValueError:
        return None


def creator_for(person: Person) -> Creator:
    organisation = None
    for affiliation in person.affiliations:
        # Last affiliation wins; within it the last name is the display form.
        if affiliation:
            organisation = affiliation[-1]
    return Creator(
        family_name=person.surname or "",
        given_name=person.firstname or "",
        organisation=organisation,
    )


def _add_authors(history: History, edit: InstanceEdit) -> None:
    for person in edit.authors:
        history.add_creator(creator_for(person))


def build_history(event: Event) -> History:
    history = History()

    if event.created is not None:
        _add_authors(history, event.created)
        history.created_date = parse_datetime(event.created.date_time)

    modifications: Iterable[Optional[InstanceEdit]] = (
        event.modified,
        *event.authored,
        *event.revised,
    )
    for edit in modifications:
        if edit is None:
            continue
        _add_authors(history, edit)
        history.add_modified_date(parse_datetime(edit.date_time))

    return history
