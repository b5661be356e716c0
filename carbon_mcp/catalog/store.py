import threading
from dataclasses import dataclass, replace
from typing import Iterable, Optional

from .schemas import Component, Icon, LoadStats, Pictogram, TokenCollection


@dataclass(frozen=True)
class CatalogSnapshot:
    """The catalog at one point in time.

    tokens is None until a token file has been loaded; an empty
    TokenCollection means tokens were loaded and happen to be empty.
    """

    components: tuple[Component, ...] = ()
    tokens: Optional[TokenCollection] = None
    icons: tuple[Icon, ...] = ()
    pictograms: tuple[Pictogram, ...] = ()

    def find_component(self, name: str) -> Optional[Component]:
        """Case-insensitive exact name lookup; the last duplicate wins."""
        name_lower = name.lower()
        for comp in reversed(self.components):
            if comp.name.lower() == name_lower:
                return comp
        return None

    def stats(self) -> LoadStats:
        return LoadStats(
            components=len(self.components),
            icons=len(self.icons),
            pictograms=len(self.pictograms),
            tokens_loaded=self.tokens is not None,
        )


class CatalogStore:
    """Owns the active catalog snapshot.

    Readers call snapshot() once per operation and work on that frozen
    object. load() builds a new snapshot and swaps the reference under a
    lock, so a reader never sees a half-replaced collection.
    """

    def __init__(self, snapshot: CatalogSnapshot = None):
        self._snapshot = snapshot or CatalogSnapshot()
        self._lock = threading.Lock()

    def snapshot(self) -> CatalogSnapshot:
        with self._lock:
            return self._snapshot

    def stats(self) -> LoadStats:
        return self.snapshot().stats()

    def load(
        self,
        components: Optional[Iterable[Component]] = None,
        tokens: Optional[TokenCollection] = None,
        icons: Optional[Iterable[Icon]] = None,
        pictograms: Optional[Iterable[Pictogram]] = None,
    ) -> LoadStats:
        """Replace the given collections; None leaves a collection as it is.

        Returns:
            LoadStats for the snapshot that is active after the swap
        """
        changes = {}
        if components is not None:
            changes["components"] = tuple(components)
        if tokens is not None:
            changes["tokens"] = tokens
        if icons is not None:
            changes["icons"] = tuple(icons)
        if pictograms is not None:
            changes["pictograms"] = tuple(pictograms)

        with self._lock:
            if changes:
                self._snapshot = replace(self._snapshot, **changes)
            return self._snapshot.stats()
