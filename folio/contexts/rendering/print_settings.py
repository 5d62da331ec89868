"""
Print Settings and Preset Resolution

The host print facility is authoritative for pagination; FOLIO only tells it
which page size and margins to use via the print stylesheet. The defaults
reproduce the fixed A4 policy (210mm x 297mm, 20mm margins).

Presets are composable and later presets override earlier ones:

    >>> resolve_print_settings(["page_letter", "margin_narrow"])
    PrintSettings(page_width='8.5in', page_height='11in', margin='12.7mm', ...)
"""

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
DEFAULT_PRESETS_PATH = Path(__file__).parent / "config" / "print_presets.yaml"
PRINT_PRESETS_PATH = Path(os.getenv("FOLIO_PRINT_PRESETS_PATH", str(DEFAULT_PRESETS_PATH)))


@dataclass(frozen=True)
class PrintSettings:
    """
    Page and typography policy handed to the host print facility.

    Attributes:
        page_width: CSS length for @page width
        page_height: CSS length for @page height
        margin: CSS length for @page margin and preview padding
        title: Title of the standalone print document
        font_family: CSS font stack for the preview
        text_color: Heading color
        body_color: Paragraph color
    """

    page_width: str = "210mm"
    page_height: str = "297mm"
    margin: str = "20mm"
    title: str = "Resume"
    font_family: str = '-apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif'
    text_color: str = "#1d1d1f"
    body_color: str = "#424245"

    @property
    def page_size(self) -> str:
        """Value for the @page size property."""
        return f"{self.page_width} {self.page_height}"


SETTING_NAMES = tuple(f.name for f in fields(PrintSettings))


def load_print_presets(config_path: Optional[Path] = None) -> Dict[str, Dict[str, Any]]:
    """
    Load the print presets YAML and flatten it to a single-level dict.

    Collapses nested structure: page.letter -> page_letter

    Args:
        config_path: Optional path to presets file (defaults to FOLIO_PRINT_PRESETS_PATH)

    Returns:
        Flattened dict mapping preset names to setting overrides
    """
    if config_path is None:
        config_path = PRINT_PRESETS_PATH

    nested = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)

    flattened = {}
    for category, presets in nested.items():
        for name, config in presets.items():
            flattened[f"{category}_{name}"] = config

    return flattened


def resolve_print_settings(
    preset_names: Optional[List[str]] = None,
    config_path: Optional[Path] = None,
    base: Optional[PrintSettings] = None,
) -> PrintSettings:
    """
    Apply named presets, in order, onto base print settings.

    Args:
        preset_names: Preset names (e.g., ["page_letter", "type_serif"])
        config_path: Optional path to presets file
        base: Settings to start from (defaults to PrintSettings())

    Returns:
        Resolved PrintSettings

    Raises:
        ValueError: If a preset is not found or sets an unknown setting
    """
    settings = base or PrintSettings()
    if not preset_names:
        return settings

    presets_dict = load_print_presets(config_path)

    for preset_name in preset_names:
        if preset_name not in presets_dict:
            available = list(presets_dict.keys())
            raise ValueError(f"Preset '{preset_name}' not found. Available presets: {available}")

        preset_config = presets_dict[preset_name]
        unknown = [key for key in preset_config if key not in SETTING_NAMES]
        if unknown:
            raise ValueError(
                f"Preset '{preset_name}' sets unknown print settings {unknown}. "
                f"Valid settings: {list(SETTING_NAMES)}"
            )

        settings = replace(settings, **{key: str(value) for key, value in preset_config.items()})

    return settings
