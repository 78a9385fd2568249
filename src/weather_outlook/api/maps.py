"""
Weather map tile URLs.

Only builds tile URL templates for the map overlays; fetching and rendering
tiles is left to the map widget.
"""

from typing import Optional
from urllib.parse import quote

from ..core import constants


class MapTilesAPI:
    """Mixin producing OpenWeather map overlay tile URLs."""

    api_key: Optional[str]
    tile_base_url: str = constants.DEFAULT_TILE_URL

    def tile_url_template(self, layer: str) -> str:
        """
        URL template with '{z}', '{x}', '{y}' placeholders for an overlay layer.

        Raises:
            ValueError: For a layer other than temp_new, precipitation_new or clouds_new
        """
        if layer not in constants.MAP_LAYERS:
            raise ValueError(
                f"Unknown map layer '{layer}'. Available layers: {', '.join(constants.MAP_LAYERS)}"
            )
        url = f"{self.tile_base_url.rstrip('/')}/map/{layer}/{{z}}/{{x}}/{{y}}.png"
        if self.api_key:
            url = f"{url}?appid={quote(self.api_key, safe='')}"
        return url

    def tile_url(self, layer: str, z: int, x: int, y: int) -> str:
        """Concrete tile URL for one zoom/column/row."""
        return (
            self.tile_url_template(layer)
            .replace("{z}", str(z))
            .replace("{x}", str(x))
            .replace("{y}", str(y))
        )
