from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "product-search-api"
    DEBUG: bool = False

    OPENSEARCH_HOST: str = "http://opensearch:9200"
    # 상품 문서가 색인된 인덱스(또는 alias) 이름
    OPENSEARCH_INDEX: str = "spree"

    LOG_LEVEL: str = "INFO"
    LOG_AS_JSON: bool = True
    LOG_TO_FILE: bool = False
    LOG_DIR: str = "/var/log/app"

settings = Settings()
