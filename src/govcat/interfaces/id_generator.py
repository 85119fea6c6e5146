"""Port through which the catalogue obtains ids for new services."""

import abc

# pylint: disable=too-few-public-methods


class IdGenerator(abc.ABC):
    """Issues opaque service ids.

    Ids are non-empty, unique for the generator's lifetime and contain no
    ``:`` or whitespace, so ``service:<id>`` store keys stay unambiguous.
    """

    @abc.abstractmethod
    def new_id(self) -> str:
        """Return a fresh id."""
