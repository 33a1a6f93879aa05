"""Pipeline settings and path configuration."""
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Pipeline settings with file paths and index service location."""

    # Project root (parent of games_index/)
    PROJECT_ROOT: Path = Path(__file__).parent.parent

    # Data paths
    DATASET_DIR: Path = PROJECT_ROOT / "dataset"
    GAMES_CSV: Path = DATASET_DIR / "Video_Game_Sales_as_of_Jan_2017.csv"
    OUTPUT_CSV: Optional[Path] = None  # None -> timestamped file in DATASET_DIR

    # Index service
    ES_BASE_URL: str = "http://127.0.0.1:9200"
    ES_INDEX: str = "games"
    ES_DOC_TYPE: str = "game"  # empty for typeless indices
    SEARCH_SIZE: int = 1000
    REQUEST_TIMEOUT: float = 30.0

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True

    @property
    def document_path(self) -> str:
        """Path under the base URL that documents are written to."""
        return f"{self.ES_INDEX}/{self.ES_DOC_TYPE or '_doc'}"

    @property
    def search_path(self) -> str:
        """Path under the base URL that ``_search`` is appended to."""
        if self.ES_DOC_TYPE:
            return f"{self.ES_INDEX}/{self.ES_DOC_TYPE}"
        return self.ES_INDEX


settings = Settings()
