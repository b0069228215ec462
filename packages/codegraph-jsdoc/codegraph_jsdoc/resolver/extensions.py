"""Module file extension rules."""

JS_EXTENSION = ".js"
JSON_EXTENSION = ".json"

MODULE_EXTENSIONS = (JS_EXTENSION, JSON_EXTENSION)


def ensure_js_extension(name: str) -> str:
    """Append .js unless name already ends in .js or .json"""
    if name.endswith(MODULE_EXTENSIONS):
        return name
    return name + JS_EXTENSION
