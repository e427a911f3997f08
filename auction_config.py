import logging
from configparser import ConfigParser
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from common_objects import Seat

@dataclass
class AuctionConfig:
    """Configuration for the auction driver."""
    default_dealer: Seat = Seat.NORTH
    unicode_suits: bool = True
    log_level: str = "WARNING"

    @classmethod
    def from_file(cls, config_path: Optional[Path]) -> 'AuctionConfig':
        config = ConfigParser()
        if config_path is not None:
            if not config.read(config_path):
                logging.warning(f"Config file {config_path} not found, using defaults")
        return cls(
            default_dealer=Seat.from_str(config.get('Auction', 'default_dealer', fallback='N')),
            unicode_suits=config.getboolean('Display', 'unicode_suits', fallback=True),
            log_level=config.get('Logging', 'level', fallback='WARNING').upper()
        )

    def logging_level(self) -> int:
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.WARNING
# end class AuctionConfig
