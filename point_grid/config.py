from dataclasses import dataclass
from dotenv import load_dotenv
import os

load_dotenv()


@dataclass(frozen=True)
class Settings:
    # 5 cells per axis, as the CAD plugin used
    grid_size: int = int(os.getenv("POINT_GRID_SIZE", "5"))
    encoding: str = os.getenv("POINT_GRID_ENCODING", "utf-8")
    log_level: str = os.getenv("POINT_GRID_LOG_LEVEL", "INFO")
    report_format: str = os.getenv("POINT_GRID_REPORT_FORMAT", "json")


settings = Settings()
