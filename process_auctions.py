import logging
import polars as pl
from pathlib import Path
from typing import Dict, List, Optional
from auction import Auction, Contract
from common_objects import Seat
from errors import ParseError

REQUIRED_COLUMNS = {"Dealer", "Auction"}

def resolve_auction(dealer_str: Optional[str], auction_str: Optional[str]) -> Dict[str, str | int]:
    """Resolve one dash separated auction, e.g. dealer "N" and "1N-P-3N-P-P-P"."""
    result: Dict[str, str | int] = {
        "AuctionLen": 0,
        "AuctionCheck": "Corrupt",
        "DerivedContract": "",
        "NextToBid": "",
    }
    try:
        auction: Auction = Auction.from_str(Seat.from_str(dealer_str or ""), auction_str or "")
    except ParseError as e:
        logging.info(f"Corrupt auction {auction_str!r} dealt by {dealer_str!r}: {e}")
        return result

    result["AuctionLen"] = len(auction)
    if auction.closed():
        contract: Optional[Contract] = auction.contract()
        result["AuctionCheck"] = "Complete"
        result["DerivedContract"] = contract.abbreviation() if contract is not None else "AP"
    else:
        result["AuctionCheck"] = "Incomplete"
        result["NextToBid"] = auction.turn().abbreviation()
    return result

def resolve_auctions(df: pl.DataFrame) -> pl.DataFrame:
    """
    Add derived auction columns to a frame of auctions.

    :param df: Polars DataFrame with 'Dealer' and 'Auction' columns
    :return: DataFrame with AuctionLen, AuctionCheck, DerivedContract and NextToBid added
    """
    missing_columns = REQUIRED_COLUMNS - set(df.columns)
    if missing_columns:
        raise ValueError(f"Missing required columns: {missing_columns}")

    derived: Dict[str, List[str | int]] = {
        "AuctionLen": [],
        "AuctionCheck": [],
        "DerivedContract": [],
        "NextToBid": [],
    }
    for row in df.select(["Dealer", "Auction"]).iter_rows(named=True):
        resolved = resolve_auction(row["Dealer"], row["Auction"])
        for col_name, values in derived.items():
            values.append(resolved[col_name])

    corrupt: int = derived["AuctionCheck"].count("Corrupt")
    if corrupt:
        logging.warning(f"{corrupt} of {len(df)} auctions could not be parsed")

    return df.with_columns([
        pl.Series("AuctionLen", derived["AuctionLen"], dtype=pl.Int64),
        pl.Series("AuctionCheck", derived["AuctionCheck"], dtype=pl.Utf8),
        pl.Series("DerivedContract", derived["DerivedContract"], dtype=pl.Utf8),
        pl.Series("NextToBid", derived["NextToBid"], dtype=pl.Utf8),
    ])

def resolve_auction_file(input_path: Path, output_path: Path) -> pl.DataFrame:
    """Read auctions from a CSV file, resolve them and write the result as CSV."""
    df: pl.DataFrame = pl.read_csv(input_path, infer_schema_length=0)
    logging.info(f"Read {len(df)} auctions from {input_path}")
    resolved: pl.DataFrame = resolve_auctions(df)
    resolved.write_csv(output_path)
    logging.info(f"Wrote {len(resolved)} resolved auctions to {output_path}")
    return resolved
