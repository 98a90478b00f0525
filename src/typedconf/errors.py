from __future__ import annotations


class SettingsError(RuntimeError):
    """Raised when configuration cannot be resolved."""


class MissingSettingError(SettingsError):
    def __init__(self, key: str):
        super().__init__(f'Required key "{key}" is missing')
        self.key = key


class InvalidSettingError(SettingsError):
    def __init__(self, key: str, value: str):
        super().__init__(f'Failed to parse setting "{key}", the value is: {value}')
        self.key = key
        self.value = value
