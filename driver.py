import logging
import cProfile
import pstats
import random
import sys
from line_profiler import LineProfiler
from pathlib import Path
from argparse import ArgumentParser, Namespace
from typing import Callable, List, Optional
from auction import Auction, AuctionBid, Contract
from auction_config import AuctionConfig
from common_objects import Seat, lineProf
from errors import ParseError
from process_auctions import resolve_auction_file

def build_arg_parser() -> ArgumentParser:
    arg_list = ArgumentParser(description="Record a bridge auction and resolve its contract")
    arg_list.add_argument("bids", nargs="*", help="Calls in order, starting with the dealer (e.g. 1NT P 3NT AP)")
    arg_list.add_argument("-D", "--dealer", help="Dealer seat (N, E, S, W or 'random'); defaults to the config value")
    arg_list.add_argument("-c", "--config", type=Path, help="INI configuration file")
    arg_list.add_argument("--ascii", action="store_true", help="Show suits as letters instead of symbols")
    arg_list.add_argument("--csv", type=Path, help="Resolve every auction in this CSV file (Dealer, Auction columns)")
    arg_list.add_argument("-o", "--output", type=Path, help="Output CSV file for --csv")
    arg_list.add_argument("--profile", action="store_true", help="Enable performance profiling")
    return arg_list

def choose_dealer(dealer_arg: Optional[str], config: AuctionConfig) -> Seat:
    if dealer_arg is None:
        return config.default_dealer
    if dealer_arg.lower() == "random":
        return random.choice(list(Seat))
    return Seat.from_str(dealer_arg)

def read_calls(auction: Auction, unicode_suits: bool, prompt: Callable[[str], str] = input) -> None:
    """Prompt for calls until the auction closes or input runs out. Bad input is re-prompted."""
    while not auction.closed():
        try:
            text: str = prompt(f"{auction.turn().name.title()} calls: ")
        except EOFError:
            break
        try:
            auction.append(AuctionBid.from_str(text))
        except ParseError as e:
            print(f"{e} Try again.")
            continue
        print(auction.to_table(unicode_suits))

def describe_outcome(auction: Auction, unicode_suits: bool) -> str:
    if not auction.closed():
        return f"Auction open, {auction.turn().name.title()} to call"
    contract: Optional[Contract] = auction.contract()
    if contract is None:
        return "Passed out"
    return f"Contract: {contract if unicode_suits else contract.abbreviation()}"

def _main_impl(lp: LineProfiler, argv: Optional[List[str]] = None) -> None:
    args: Namespace = build_arg_parser().parse_args(argv)

    try:
        config: AuctionConfig = AuctionConfig.from_file(args.config)
        logging.getLogger().setLevel(config.logging_level())
        unicode_suits: bool = config.unicode_suits and not args.ascii

        if args.csv:
            output: Path = args.output if args.output else args.csv.with_name(f"{args.csv.stem}_resolved.csv")
            resolve_auction_file(args.csv, output)
            return

        dealer: Seat = choose_dealer(args.dealer, config)
        if args.bids:
            auction = Auction.from_str(dealer, "-".join(args.bids))
        else:
            auction = Auction(dealer)
            print(auction.to_table(unicode_suits))
            read_calls(auction, unicode_suits)

        print(auction.to_table(unicode_suits))
        print(describe_outcome(auction, unicode_suits))

    except ParseError as e:
        logging.error(f"Invalid input: {e}")
    except Exception as e:
        logging.error(f"Error during processing: {str(e)}")

def main() -> None:
    """Entry point for the bridge-auction console script."""
    logging.basicConfig(level=logging.WARNING, format='%(asctime)s - %(levelname)s - %(message)s')
    if '--profile' in sys.argv:
        profiler = cProfile.Profile()
        profiler.enable()
        lineProf.add_function(_main_impl)
        lineProf.add_function(Auction.contract)
        lineProf.runctx('_main_impl(lineProf)', globals(), {'lineProf': lineProf})
        lineProf.print_stats()
        profiler.disable()
        stats = pstats.Stats(profiler)
        stats.strip_dirs().sort_stats('time').print_stats(10)  # Top 10 functions sorted by time
    else:
        _main_impl(lineProf)

if __name__ == "__main__":
    main()
