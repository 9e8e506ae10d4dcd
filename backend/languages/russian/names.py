"""Splitting full names and building initials.

Full names are "Фамилия Имя Отчество", separated by single spaces.
"""
from dataclasses import dataclass

NAME_SEPARATOR = " "


@dataclass(frozen=True, slots=True)
class FullName:
    lastname: str
    firstname: str | None = None
    middlename: str | None = None

    def to_dict(self) -> dict:
        return {"lastname": self.lastname, "firstname": self.firstname, "middlename": self.middlename}


def divide(full_name: str) -> FullName:
    """Split a full name into its parts; tokens past the third are ignored."""
    tokens = full_name.split(NAME_SEPARATOR)
    return FullName(
        lastname=tokens[0],
        firstname=tokens[1] if len(tokens) > 1 else None,
        middlename=tokens[2] if len(tokens) > 2 else None,
    )


def initial(full_name: str) -> str:
    """Lastname followed by initials: Иванов Иван Иванович -> Иванов И. И."""
    name = divide(full_name)
    parts = [name.lastname]
    parts.extend(f"{given[:1]}." for given in (name.firstname, name.middlename) if given is not None)
    return NAME_SEPARATOR.join(parts)
