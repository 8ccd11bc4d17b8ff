"""Image loading for material textures."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional, Union

import pygame

from utils.assets import get_asset_path

logger = logging.getLogger(__name__)


class TextureLoader:
    """Loads images into opaque texture handles, caching one handle per path.

    Relative paths are resolved against the repository ``assets`` directory.
    A file that is missing or unreadable yields ``None`` so callers can fall
    back to flat colors.
    """

    def __init__(self, base_dir: Optional[Path] = None) -> None:
        self._base_dir = base_dir
        self._cache: Dict[Path, Optional[pygame.Surface]] = {}

    def resolve(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        if path.is_absolute():
            return path
        if self._base_dir is not None:
            return self._base_dir / path
        return get_asset_path(*path.parts)

    def load(self, path: Optional[Union[str, Path]]) -> Optional[pygame.Surface]:
        if path is None:
            return None
        resolved = self.resolve(path)
        if resolved in self._cache:
            return self._cache[resolved]

        texture = None
        if not resolved.exists():
            logger.warning("Texture not found at %s", resolved)
        else:
            try:
                texture = pygame.image.load(str(resolved))
            except pygame.error as exc:
                logger.warning("Could not load texture %s: %s", resolved, exc)
        self._cache[resolved] = texture
        return texture
