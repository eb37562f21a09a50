"""Document-level registries: automatic styles, common styles, font faces."""

from ._automatic_styles import FAMILY_PREFIXES, AutomaticStyles
from ._common_styles import CommonStyles
from ._font_faces import FontFaceDeclarations

__all__ = [
    "FAMILY_PREFIXES",
    "AutomaticStyles",
    "CommonStyles",
    "FontFaceDeclarations",
]
