from pathlib import Path

# id of the <style> element the host injects the stylesheet into
STYLE_ELEMENT_ID = "plugin-canvas-card-bg-remover"

# Environment variable pointing at the persisted plugin data file
DATA_FILE_ENV = "CARDBG_DATA_FILE"

# Search paths for the persisted plugin data, first match wins
DEFAULT_DATA_PATHS: list[Path] = [
    Path("data.json"),
    Path("~/.config/cardbg/data.json").expanduser(),
]

# Host command ids
ENABLE_COMMAND_ID = "canvas-sub-styler-enable"
DISABLE_COMMAND_ID = "canvas-sub-styler-disable"
