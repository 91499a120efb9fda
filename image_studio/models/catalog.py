"""Display labels for the supported styles and aspect ratios."""

from typing import Optional, Tuple

from pydantic import BaseModel

from .enums import ImageStyle, AspectRatio


class CatalogOption(BaseModel):
    """One selectable option with its English and Arabic labels."""
    value: str
    label: str
    label_ar: Optional[str] = None

    class Config:
        frozen = True


STYLE_OPTIONS: Tuple[CatalogOption, ...] = (
    CatalogOption(value=ImageStyle.NONE.value, label="No Style (Default)", label_ar="بدون نمط (افتراضي)"),
    CatalogOption(value=ImageStyle.REALISTIC.value, label="Realistic / Photorealistic", label_ar="واقعية"),
    CatalogOption(value=ImageStyle.CARTOON.value, label="Cartoon", label_ar="كرتونية"),
    CatalogOption(value=ImageStyle.FANTASY.value, label="Fantasy", label_ar="خيالية"),
    CatalogOption(value=ImageStyle.ARTISTIC.value, label="Artistic", label_ar="فنية"),
    CatalogOption(value=ImageStyle.THREE_D.value, label="3D Render", label_ar="ثلاثي الأبعاد"),
    CatalogOption(value=ImageStyle.CINEMATIC.value, label="Cinematic", label_ar="سينمائية"),
    CatalogOption(value=ImageStyle.ANIME.value, label="Anime", label_ar="أنيمي"),
    CatalogOption(value=ImageStyle.OIL_PAINTING.value, label="Oil Painting", label_ar="رسم زيتي"),
)

# Display order, not enum order
ASPECT_RATIO_OPTIONS: Tuple[CatalogOption, ...] = (
    CatalogOption(value=AspectRatio.SQUARE.value, label="Square (1:1)"),
    CatalogOption(value=AspectRatio.LANDSCAPE_16_9.value, label="Landscape (16:9)"),
    CatalogOption(value=AspectRatio.PORTRAIT_9_16.value, label="Portrait (9:16)"),
    CatalogOption(value=AspectRatio.LANDSCAPE_4_3.value, label="Classic Landscape (4:3)"),
    CatalogOption(value=AspectRatio.PORTRAIT_3_4.value, label="Classic Portrait (3:4)"),
)

_STYLE_INDEX = {option.value: option for option in STYLE_OPTIONS}
_RATIO_INDEX = {option.value: option for option in ASPECT_RATIO_OPTIONS}


def style_label(style: ImageStyle) -> str:
    return _STYLE_INDEX[ImageStyle(style).value].label


def ratio_label(ratio: AspectRatio) -> str:
    return _RATIO_INDEX[AspectRatio(ratio).value].label
