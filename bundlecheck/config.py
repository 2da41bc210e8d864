from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="BUNDLECHECK_")

    app_name: str = "BundleCheck"
    debug: bool = False

    log_level: str = "INFO"

    # Upper bound on titles resolved per API request.
    max_catalog_size: int = 500


settings = Settings()


# =============================================================================
# TITLE MATCHING THRESHOLDS
# =============================================================================

# Minimum bigram similarity for two titles to be considered the same product
FUZZY_THRESHOLD = 0.85

# Shared leading words covering more than this share of BOTH titles,
# followed by divergent words, means distinct products ("x tycoon 3" / "x tycoon world")
SHARED_PREFIX_RATIO = 0.6

# A longer title that only adds up to this many characters to a shorter one
# is treated as a different product, not a spelling variant
SHORT_SUFFIX_MAX_DELTA = 3

# Scraped titles shorter than this are page noise, not products
MIN_TITLE_LENGTH = 2
