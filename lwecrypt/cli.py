import os
import sys
import argparse
from .params import bcolors
from .keystore import create_keystore
from .public_api import generate_modulus, generate_keys_to_files, encrypt_bits_to_file, decrypt_file

# -----------------------------
# CLI Main with Interactive Menu
# -----------------------------
def menu_generate_keystore():
    passphrase = input("Enter keystore passphrase: ")
    keystore_file = input("Keystore filename (default keystore.json): ").strip() or "keystore.json"
    create_keystore(passphrase, keystore_file)
    print(f"Keystore created at {keystore_file}")

def menu_generate_q():
    n = int(input("Dimension n: ").strip())
    print(f"q = {generate_modulus(n)} (smallest prime in [{n * n}, {2 * n * n}])")

def menu_generate_keys():
    n = int(input("Dimension n (default 10): ").strip() or 10)
    q_str = input("Prime modulus q (blank = smallest prime in [n^2, 2n^2]): ").strip()
    q = int(q_str) if q_str else None
    pubfile = input("Public key filename (default lwe_pub.json): ").strip() or "lwe_pub.json"
    use_keystore = input("Store secret key in keystore? (y/n): ").strip().lower() or "n"
    secfile, keystore, passphrase, key_name = None, None, None, None
    if use_keystore == "y":
        keystore = input("Keystore filename (default keystore.json): ").strip() or "keystore.json"
        passphrase = input("Keystore passphrase: ")
        key_name = input("Key name in keystore: ")
    else:
        secfile = input("Secret key filename (default lwe_sec.json): ").strip() or "lwe_sec.json"
    generate_keys_to_files(n, q, pubfile, secfile, keystore, passphrase, key_name)

def menu_encrypt():
    pubfile = input("Public key file (default lwe_pub.json): ").strip() or "lwe_pub.json"
    if not os.path.exists(pubfile):
        print("Public key not found. Generate keys first.")
        return
    bits = input("Binary string to encrypt: ")
    out_file = input("Output filename (default lwe_enc.json): ").strip() or "lwe_enc.json"
    encrypt_bits_to_file(pubfile, bits, out_file)

def menu_decrypt():
    use_keystore = input("Use keystore for secret key? (y/n): ").strip().lower() or "n"
    secfile, keystore, passphrase, key_name = None, None, None, None
    if use_keystore == "y":
        keystore = input("Keystore filename (default keystore.json): ").strip() or "keystore.json"
        passphrase = input("Keystore passphrase: ")
        key_name = input("Key name in keystore: ")
    else:
        secfile = input("Secret key file (default lwe_sec.json): ").strip() or "lwe_sec.json"
    encfile = input("Ciphertexts file (default lwe_enc.json): ").strip() or "lwe_enc.json"
    if not os.path.exists(encfile):
        print("Ciphertexts file not found.")
        return
    decrypt_file(encfile, secfile, keystore, passphrase, key_name)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="LWE public-key bit encryption")
    subparsers = parser.add_subparsers(dest="command")

    gen_q_parser = subparsers.add_parser("gen_q", help="Find the smallest prime q in [n^2, 2n^2]")
    gen_q_parser.add_argument("--n", type=int, required=True, help="Dimension")

    keygen_parser = subparsers.add_parser("keygen", help="Generate an LWE key pair")
    keygen_parser.add_argument("--n", type=int, default=10, help="Dimension")
    keygen_parser.add_argument("--q", type=int, help="Prime modulus (default: smallest prime in [n^2, 2n^2])")
    keygen_parser.add_argument("--pubfile", default="lwe_pub.json", help="Public key filename")
    keygen_parser.add_argument("--secfile", default="lwe_sec.json", help="Secret key filename")
    keygen_parser.add_argument("--keystore", help="Keystore filename for the secret key")
    keygen_parser.add_argument("--passphrase", help="Keystore passphrase")
    keygen_parser.add_argument("--key_name", help="Key name in keystore")
    keygen_parser.add_argument("--seed", type=int, help="Seed for reproducible keys")

    encrypt_parser = subparsers.add_parser("encrypt", help="Encrypt a binary string with a public key")
    encrypt_parser.add_argument("--pubfile", default="lwe_pub.json", help="Public key file")
    encrypt_parser.add_argument("--bits", required=True, help="Binary string, e.g. 1011")
    encrypt_parser.add_argument("--out_file", default="lwe_enc.json", help="Output ciphertexts file")
    encrypt_parser.add_argument("--seed", type=int, help="Seed for reproducible ciphertexts")

    decrypt_parser = subparsers.add_parser("decrypt", help="Decrypt ciphertexts with a secret key")
    decrypt_parser.add_argument("--encfile", default="lwe_enc.json", help="Ciphertexts file")
    decrypt_parser.add_argument("--secfile", default="lwe_sec.json", help="Secret key file")
    decrypt_parser.add_argument("--keystore", help="Keystore filename")
    decrypt_parser.add_argument("--passphrase", help="Keystore passphrase")
    decrypt_parser.add_argument("--key_name", help="Key name in keystore")

    create_keystore_parser = subparsers.add_parser("create_keystore", help="Create encrypted keystore")
    create_keystore_parser.add_argument("--passphrase", required=True, help="Keystore passphrase")
    create_keystore_parser.add_argument("--keystore_file", default="keystore.json", help="Keystore filename")
    return parser

def run_command(args):
    match args.command:
        case "gen_q":
            print(generate_modulus(args.n))
        case "keygen":
            generate_keys_to_files(
                args.n, args.q, args.pubfile, args.secfile,
                args.keystore, args.passphrase, args.key_name, args.seed,
            )
        case "encrypt":
            encrypt_bits_to_file(args.pubfile, args.bits, args.out_file, args.seed)
        case "decrypt":
            decrypt_file(args.encfile, args.secfile, args.keystore, args.passphrase, args.key_name)
        case "create_keystore":
            create_keystore(args.passphrase, args.keystore_file)
            print(f"Keystore created: {args.keystore_file}")

def interactive_menu():
    while True:
        print(f"{bcolors.OKCYAN}LWE CLI - public-key bit encryption from Learning With Errors{bcolors.ENDC}")
        print("")
        print(f"{bcolors.BOLD}1){bcolors.ENDC} Create encrypted keystore")
        print(f"{bcolors.BOLD}2){bcolors.ENDC} Find modulus q for dimension n")
        print(f"{bcolors.BOLD}3){bcolors.ENDC} Generate LWE key pair")
        print(f"{bcolors.BOLD}4){bcolors.ENDC} Encrypt binary string with public key")
        print(f"{bcolors.BOLD}5){bcolors.ENDC} Decrypt ciphertexts with secret key")
        print(f"{bcolors.BOLD}0){bcolors.ENDC} Exit")
        choice = input(f"{bcolors.BOLD}Choice: {bcolors.ENDC}").strip()

        try:
            match choice:
                case "0":
                    break
                case "1":
                    menu_generate_keystore()
                case "2":
                    menu_generate_q()
                case "3":
                    menu_generate_keys()
                case "4":
                    menu_encrypt()
                case "5":
                    menu_decrypt()
                case _:
                    print("Invalid choice")
        except (ValueError, OSError) as e:
            print(f"{bcolors.FAIL}ERROR:{bcolors.ENDC}", e)
        _ = input(f"{bcolors.OKGREEN}Any Key to Continue{bcolors.ENDC}")

def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        if args.command:
            run_command(args)
        else:
            interactive_menu()
    except (ValueError, OSError) as e:
        print(f"{bcolors.FAIL}ERROR:{bcolors.ENDC}", e)
        sys.exit(1)

if __name__ == "__main__":
    main()
