from __future__ import annotations

from typing import Callable, Optional

from metatag_ai import logger as logger_mod
from metatag_ai.content import Renderable
from metatag_ai.errors import SettingsError, UnexpectedError

from .generator import MetaDescriptionGenerator
from .result import Failure, GenerationResult

log = logger_mod.get_logger()

ItemLoader = Callable[[str], Optional[Renderable]]

# Identifier the edit form sends before the item has been saved
UNSAVED_ITEM_ID = "new"


class GenerateRequestHandler:
    """Inbound trigger for the editor's preview dialog.

    ``handle`` returns ``{"description": ...}`` or ``{"error": ...}``.
    Approve and reject happen on the caller's side; regenerate is simply
    another ``handle`` call.
    """

    def __init__(
        self, *, generator: MetaDescriptionGenerator, loader: ItemLoader
    ) -> None:
        self._generator = generator
        self._loader = loader

    def handle(self, item_id: Optional[str], regenerate: bool = False) -> dict[str, str]:
        return self.run(item_id, regenerate=regenerate).to_payload()

    def run(self, item_id: Optional[str], regenerate: bool = False) -> GenerationResult:
        item_id = (item_id or "").strip()
        if not item_id or item_id == UNSAVED_ITEM_ID:
            return Failure(
                "Cannot generate meta description for unsaved content. "
                "Please save the content first."
            )

        try:
            item = self._loader(item_id)
        except Exception as e:  # noqa: BLE001
            log.error(f"Error loading item {item_id}: {e}")
            return Failure(f"Error loading content: {e}")
        if item is None:
            return Failure("Error loading content: Content not found")

        try:
            settings = self._generator.settings()
        except SettingsError as e:
            return Failure(str(e))
        except Exception as e:  # noqa: BLE001
            log.error(f"Settings could not be read: {e}", exc_info=True)
            return Failure(str(UnexpectedError()))
        if settings.enabled and not settings.allows_content_type(item.bundle):
            return Failure(
                "AI meta description generation is not enabled for this content type."
            )

        if regenerate:
            log.info(f"Regenerating meta description for item {item_id}")
        return self._generator.generate(item)
