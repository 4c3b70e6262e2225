# -*- coding: utf-8 -*-
import os
from pathlib import Path

# --- PRESET FORMAT MARKERS ---
# These are the anchors the Arma 3 Launcher writes into exported presets.
PRESET_NAME_META = "arma:PresetName"
MOD_CONTAINER = "ModContainer"
DISPLAY_NAME = "DisplayName"
LINK_FIELD = "Link"
MOD_LIST_CLASS = "mod-list"
SOURCE_CLASS = "from-steam"

DEFAULT_PRESET_NAME = "Unnamed"

# --- CONFIGURATION ---
ENV_FILE = ".env"

def load_env(root=None):
    """Loads KEY=VALUE pairs from a local .env without overriding the real environment."""
    env_path = os.path.join(root or os.getcwd(), ENV_FILE)
    if not os.path.exists(env_path): return
    with open(env_path, "r") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#") and "=" in line:
                k, v = line.split("=", 1)
                os.environ.setdefault(k.strip(), v.strip())

def get_result_name():
    return os.getenv("PRESET_RESULT_NAME") or "CombinedPreset"

def get_export_dir():
    return Path(os.getenv("PRESET_EXPORT_DIR") or os.getcwd())
