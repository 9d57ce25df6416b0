from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # DexScreener (public API, no key)
    dexscreener_base_url: str = "https://api.dexscreener.com"
    dexscreener_timeout_sec: float = 10.0

    # Discovery / resolution targets
    target_chain_id: str = "base"
    target_dex_id: str = "uniswap"
    pair_batch_size: int = 10  # addresses per /latest/dex/tokens request

    # Saved tokens
    default_trade_amount: str = "0.1"

    # Logging (only applied when TokenProvider(configure_logging=True))
    log_level: str = "INFO"
    log_dir: str = ""  # empty = console only


settings = Settings()
