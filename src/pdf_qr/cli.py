import argparse
import getpass
import sys

from pdf_qr.backend.app.core.security import BcryptPasswordHasher


def hash_password() -> int:
    password = getpass.getpass("Admin password: ")
    if not password:
        print("Password cannot be empty", file=sys.stderr)
        return 1
    if password != getpass.getpass("Repeat password: "):
        print("Passwords do not match", file=sys.stderr)
        return 1
    print(BcryptPasswordHasher().hash(password))
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="pdf-qr")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("serve", help="run the API server")
    sub.add_parser("hash-password", help="print a bcrypt hash for ADMIN_PASSWORD_HASH")
    args = parser.parse_args(argv)

    if args.command == "serve":
        from pdf_qr.backend.app.runner import run
        run()
        return 0
    return hash_password()


if __name__ == "__main__":
    sys.exit(main())
