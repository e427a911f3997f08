"""Tests for batch auction resolution."""

import polars as pl
import pytest
import sys
from pathlib import Path

# Add parent directory to path so we can import modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from process_auctions import resolve_auction, resolve_auctions, resolve_auction_file


class TestResolveAuction:
    """Tests for resolve_auction function."""

    def test_simple_auction(self):
        """Test 1C-P-1H-P-1NT auction."""
        result = resolve_auction("N", "1C-P-1H-P-1NT-P-P-P")
        assert result["DerivedContract"] == "1NT"
        assert result["AuctionCheck"] == "Complete"
        assert result["AuctionLen"] == 8
        assert result["NextToBid"] == ""

    def test_all_pass(self):
        """Test all-pass auction."""
        result = resolve_auction("W", "P-P-P-P")
        assert result["DerivedContract"] == "AP"
        assert result["AuctionCheck"] == "Complete"

    def test_doubled_contract(self):
        """Test doubled contract."""
        result = resolve_auction("N", "1S-P-P-X-P-P-P")
        assert result["DerivedContract"] == "1SX"

    def test_redoubled_contract(self):
        """Test redoubled contract."""
        result = resolve_auction("S", "1D-X-XX-AP")
        assert result["DerivedContract"] == "1DXX"
        assert result["AuctionLen"] == 6

    def test_incomplete(self):
        """Test an auction still in progress."""
        result = resolve_auction("W", "P-P-P")
        assert result["AuctionCheck"] == "Incomplete"
        assert result["DerivedContract"] == ""
        assert result["NextToBid"] == "S"

    def test_corrupt(self):
        """Test unparseable calls and dealers."""
        assert resolve_auction("N", "1C-1F-P")["AuctionCheck"] == "Corrupt"
        assert resolve_auction("N", "8C-P-P-P")["AuctionCheck"] == "Corrupt"
        assert resolve_auction("Q", "1C-P-P-P")["AuctionCheck"] == "Corrupt"
        assert resolve_auction(None, "1C-P-P-P")["AuctionCheck"] == "Corrupt"

    def test_missing_auction(self):
        """Test a missing auction is an empty, open auction."""
        result = resolve_auction("E", None)
        assert result["AuctionCheck"] == "Incomplete"
        assert result["AuctionLen"] == 0
        assert result["NextToBid"] == "E"


class TestResolveAuctions:
    """Tests for DataFrame resolution."""

    def test_adds_columns(self):
        """Test derived columns are appended row by row."""
        df = pl.DataFrame({
            "Board": [1, 2, 3],
            "Dealer": ["N", "E", "S"],
            "Auction": ["1NT-P-3NT-P-P-P", "P-P", "1C-Z"],
        })
        result = resolve_auctions(df)
        assert result.columns == ["Board", "Dealer", "Auction", "AuctionLen", "AuctionCheck", "DerivedContract", "NextToBid"]
        assert result["DerivedContract"].to_list() == ["3NT", "", ""]
        assert result["AuctionCheck"].to_list() == ["Complete", "Incomplete", "Corrupt"]
        assert result["NextToBid"].to_list() == ["", "W", ""]
        assert result["AuctionLen"].to_list() == [6, 2, 0]

    def test_missing_columns(self):
        """Test frames without Dealer or Auction are rejected."""
        with pytest.raises(ValueError):
            resolve_auctions(pl.DataFrame({"Auction": ["P-P-P-P"]}))

    def test_empty_frame(self):
        """Test an empty frame still gets the derived columns."""
        df = pl.DataFrame({"Dealer": [], "Auction": []}, schema={"Dealer": pl.Utf8, "Auction": pl.Utf8})
        result = resolve_auctions(df)
        assert len(result) == 0
        assert "DerivedContract" in result.columns


class TestResolveAuctionFile:
    """Tests for CSV round trip."""

    def test_csv(self, tmp_path):
        """Test reading, resolving and writing a CSV file."""
        input_path = tmp_path / "auctions.csv"
        output_path = tmp_path / "resolved.csv"
        input_path.write_text("Dealer,Auction\nN,1C-P-1H-P-1NT-P-P-P\nW,P-P-P-P\n")
        resolved = resolve_auction_file(input_path, output_path)
        assert resolved["DerivedContract"].to_list() == ["1NT", "AP"]
        written = pl.read_csv(output_path, infer_schema_length=0)
        assert written["DerivedContract"].to_list() == ["1NT", "AP"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
