from pathlib import Path

# Repo-root conventional directories/files (overrideable via settings.yaml / .env)
CONFIG_DIR = Path("configs")
SETTINGS_FILE = CONFIG_DIR / "settings.yaml"
ENV_FILE = Path(".env")

DICTS_DIR = Path("dicts")
TAXONOMY_FILE = DICTS_DIR / "hierarchy.json"

# Environment variable overriding Settings.taxonomy_file
TAXONOMY_FILE_ENV = "TAXONOMY_FILE"

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")
