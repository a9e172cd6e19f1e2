import sys
import logging
import argparse
from rlwe_wallet.models import (ExchangeParams, ExchangeOutcome, bcolors)
from rlwe_wallet.core import (run_exchange, validate_parameters)

def print_outcome(outcome: ExchangeOutcome, show_secret: bool = True):
    print(f"{bcolors.WARNING}{bcolors.BOLD}RLWE Wallet - n={outcome.params.n}, q={outcome.params.q}{bcolors.ENDC}")
    print(f"{bcolors.GREY}{bcolors.BOLD}(]≡≡≡≡ø‡»{bcolors.OKCYAN}========================================-{bcolors.ENDC}")
    if show_secret:
        print(f"{bcolors.BOLD}BTC Private Key:{bcolors.ENDC}", outcome.btc.private_key)
    print(f"{bcolors.BOLD}BTC Public Key:{bcolors.ENDC}", outcome.btc.public_key)
    print(f"{bcolors.BOLD}BTC Address:{bcolors.ENDC}", f"{bcolors.OKGREEN}{outcome.btc.address}{bcolors.ENDC}")
    if show_secret:
        print(f"{bcolors.BOLD}ETH Private Key:{bcolors.ENDC}", outcome.eth.private_key)
    print(f"{bcolors.BOLD}ETH Address:{bcolors.ENDC}", f"{bcolors.OKGREEN}{outcome.eth.address}{bcolors.ENDC}")

def main(argv=None):
    parser = argparse.ArgumentParser(description="RLWE Wallet - transform-based key exchange to BTC/ETH keys")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    exchange_parser = subparsers.add_parser("exchange", help="Run a key exchange and derive BTC/ETH keys")
    exchange_parser.add_argument("--n", type=int, default=ExchangeParams.n, help="Ring dimension (power of 2)")
    exchange_parser.add_argument("--q", type=int, default=ExchangeParams.q, help="Prime modulus (> n)")
    exchange_parser.add_argument("--uncompressed", action="store_true", help="Use an uncompressed BTC public key")
    exchange_parser.add_argument("--hide_secret", action="store_true", help="Do not print private keys")

    params_parser = subparsers.add_parser("params", help="Validate a parameter set")
    params_parser.add_argument("--n", type=int, default=ExchangeParams.n)
    params_parser.add_argument("--q", type=int, default=ExchangeParams.q)

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    try:
        match args.command:
            case "params":
                validate_parameters(args.n, args.q)
                print(f"{bcolors.OKGREEN}Parameters valid:{bcolors.ENDC} n={args.n}, q={args.q}")
            case "exchange" | None:
                n = getattr(args, "n", ExchangeParams.n)
                q = getattr(args, "q", ExchangeParams.q)
                outcome = run_exchange(n, q, compressed=not getattr(args, "uncompressed", False))
                if not outcome.ok:
                    print(f"{bcolors.FAIL}ERROR:{bcolors.ENDC}", outcome.message)
                    sys.exit(1)
                print_outcome(outcome, show_secret=not getattr(args, "hide_secret", False))
    except Exception as e:
        print(f"{bcolors.FAIL}ERROR:{bcolors.ENDC}", e)
        sys.exit(1)

if __name__ == "__main__":
    main()
