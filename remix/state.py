from collections import OrderedDict
import uuid

from remix.models import Recipe


MAX_KITCHENS = 1000


class Kitchen:
    """The recipe one page is showing right now.

    Every update replaces what was there. With several fetches in flight the
    last one to finish wins.
    """

    def __init__(self) -> None:
        self.recipe: Recipe | None = None

    def show_recipe(self, recipe: Recipe) -> None:
        self.recipe = recipe


class Kitchens:
    """One `Kitchen` per open page, keyed by the id the page was served with.

    Only the most recently used `max_size` pages are kept.
    """

    def __init__(self, *, max_size: int = MAX_KITCHENS) -> None:
        self.max_size = max_size
        self._kitchens: OrderedDict[str, Kitchen] = OrderedDict()

    def __len__(self) -> int:
        return len(self._kitchens)

    def new_id(self) -> str:
        return uuid.uuid4().hex

    def get(self, id: str) -> Kitchen:
        kitchen = self._kitchens.pop(id, None)
        if kitchen is None:
            kitchen = Kitchen()
        self._kitchens[id] = kitchen
        while len(self._kitchens) > self.max_size:
            self._kitchens.popitem(last=False)
        return kitchen
