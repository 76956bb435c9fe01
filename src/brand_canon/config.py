from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Source data
    connections_path: str = "brandConnections.json"
    brands_mapping_path: str = "brandsMapping.json"
    products_path: str = "pharmacyItems.json"
    secondary_delimiter: str = ";"

    # Identifiers stamped into assignment keys
    source: str = "APO"
    country: str = "lt"

    # Matching
    max_ngram_tokens: int = 4
    match_workers: int = 1

    # Rule gate
    stopwords: frozenset[str] = frozenset({"bio", "neb"})
    front_only: frozenset[str] = frozenset({
        "rich", "rff", "flex", "ultra", "gum", "beauty",
        "orto", "free", "112", "kin", "happy",
    })
    front_or_second: frozenset[str] = frozenset({"heel", "contour", "nero", "rsv"})
    # alias first token -> exact-case prefix the raw title must start with
    uppercase_aliases: dict[str, str] = {"happy": "HAPPY"}

    # Log
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="BRAND_CANON_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
