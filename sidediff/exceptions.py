from pathlib import Path


class SidediffError(Exception):
    pass


class InvalidConfigError(SidediffError):
    def __init__(self, config_path: Path, error: Exception):
        self.config_path = config_path
        self.error = error
        super().__init__(f"Invalid config file ({config_path}): {error}")


class ConfigExistsError(SidediffError):
    def __init__(self, config_path: Path):
        self.config_path = config_path
        super().__init__(f"{config_path} already exists. Use --overwrite to replace.")
