from __future__ import annotations

import argparse
import logging

from wsprenc import Station, WsprConstants, normalize_callsign


def main() -> None:
	parser = argparse.ArgumentParser(description="Print the packed message and channel symbols for a WSPR station")
	parser.add_argument("callsign", help="Callsign, e.g. G0UPL (padded to 6 characters)")
	parser.add_argument("locator", help="4-character Maidenhead locator, e.g. IO91")
	parser.add_argument("power_dbm", type=int, help="Transmit power in dBm (0..60)")
	parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
	args = parser.parse_args()

	logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

	const = WsprConstants()
	station = Station(normalize_callsign(args.callsign), args.locator.upper(), args.power_dbm)
	print("callsign ", repr(station.callsign))
	print("n_call   ", station.encode_call())
	print("m        ", station.encode_m())
	print("message  ", station.message_str())
	symbols = station.encode()
	assert symbols.size == const.num_symbols
	print("symbols  ", ",".join(str(int(s)) for s in symbols))


if __name__ == "__main__":
	main()
