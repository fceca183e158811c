# ruff: noqa: E501

import os
from typing import Callable

from pydantic import SecretStr

from util.singleton import Singleton


class Config(metaclass = Singleton):

    DEV_VERIFY_TOKEN = "it_is_really_whatsapp"  # needed for local dev mode

    log_level: str
    log_whatsapp_update: bool
    whatsapp_must_auth: bool
    website_url: str
    version: str

    whatsapp_verify_token: SecretStr
    whatsapp_app_secret: SecretStr

    def all_secrets(self) -> list[SecretStr]:
        return [
            self.whatsapp_verify_token,
            self.whatsapp_app_secret,
        ]

    def __init__(
        self,
        def_log_level: str = "INFO",
        def_log_whatsapp_update: bool = False,
        def_whatsapp_must_auth: bool = False,
        def_website_url: str = "https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks",
        def_version: str = "dev",

        def_whatsapp_verify_token: SecretStr = SecretStr(DEV_VERIFY_TOKEN),
        def_whatsapp_app_secret: SecretStr = SecretStr("invalid"),
    ):
        # @formatter:off
        self.log_level = self.__env("LOG_LEVEL", lambda: def_log_level).lower()
        self.log_whatsapp_update = self.__env("LOG_WA_UPDATE", lambda: str(def_log_whatsapp_update)).lower() == "true"
        self.whatsapp_must_auth = self.__env("WHATSAPP_AUTH_ON", lambda: str(def_whatsapp_must_auth)).lower() == "true"
        self.website_url = self.__env("WEBSITE_URL", lambda: def_website_url)
        self.version = self.__env("VERSION", lambda: def_version)

        self.whatsapp_verify_token = self.__senv("WHATSAPP_VERIFY_TOKEN", lambda: def_whatsapp_verify_token)
        self.whatsapp_app_secret = self.__senv("WHATSAPP_APP_SECRET", lambda: def_whatsapp_app_secret)
        # @formatter:on

    @classmethod
    def reset(cls):
        Singleton.forget(cls)

    @staticmethod
    def __env(name: str, default: Callable[[], str]) -> str:
        env_value = os.environ.get(name, "").strip()
        return env_value if env_value else default()

    @staticmethod
    def __senv(name: str, default: Callable[[], SecretStr]) -> SecretStr:
        env_value = os.environ.get(name, "").strip()
        return SecretStr(env_value) if env_value else default()


config = Config()
