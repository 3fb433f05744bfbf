"""Constants shared by the completion engine and the language server."""

from __future__ import annotations

from types import MappingProxyType

# Characters of text before the cursor that are scanned per query
MAX_LOOKBACK = 2000

# Call spellings that construct an element: React.createElement(...) and the e(...) alias
CALL_TOKENS = ("React.createElement", "e")

# Settings section and key read from the client
CONFIG_SECTION = "reactLuauPropsHelper"
CONFIG_PROPS_KEY = "props"

# Completion is requested after a space or a newline
TRIGGER_CHARACTERS = [" ", "\n"]

SUPPORTED_LANGUAGE_IDS = frozenset({"lua", "luau"})
SUPPORTED_FILE_SUFFIXES = (".lua", ".luau")

COMPLETION_DETAIL = "{class_name} property (React Luau helper)"

_GUI_OBJECT_PROPERTIES = (
    "BackgroundColor3",
    "BackgroundTransparency",
    "BorderSizePixel",
    "BorderColor3",
    "Size",
    "Position",
    "AnchorPoint",
    "Visible",
    "ZIndex",
    "LayoutOrder",
)

# Built-in properties per class, in suggestion order. Used when the user
# settings have no (or an empty) entry for a class.
DEFAULT_PROPS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        "TextLabel": (
            "Text",
            "TextColor3",
            "TextTransparency",
            "TextStrokeColor3",
            "TextStrokeTransparency",
            "Font",
            "TextSize",
            "RichText",
            "TextWrapped",
            "TextXAlignment",
            "TextYAlignment",
            *_GUI_OBJECT_PROPERTIES,
        ),
        "Frame": (
            *_GUI_OBJECT_PROPERTIES,
            "AutomaticSize",
        ),
        "ImageLabel": (
            "Image",
            "ImageColor3",
            "ImageTransparency",
            "ScaleType",
            "SliceCenter",
            *_GUI_OBJECT_PROPERTIES,
        ),
    }
)
