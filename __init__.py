"""
bridge-auction
==============
Bookkeeping for the bidding phase of contract bridge.

This package provides functionality to:
- Parse suits, bids, calls and contract shorthand ("1NT", "no bid", "3Hxx")
- Record an auction seat by seat, starting from the dealer
- Detect when the auction has closed and resolve the final contract
- Render the auction as a four column table
- Resolve many auctions at once from CSV files
"""

__version__ = "0.1.0"

# Note: With a flat module structure, imports should be done directly:
# Example:
#   from auction import Auction, AuctionBid, Contract
#   from common_objects import Seat, Suit
#   from errors import ParseError
