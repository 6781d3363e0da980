from pwdgen import generate_full


def main() -> None:
    result = generate_full()  # uses DEFAULT_OPTIONS from config.py
    print("\n[Password Generator]")
    print(f"Generated password: {result.password}")
    print(f"Entropy: {result.entropy} bits ({result.strength.value})\n")


if __name__ == "__main__":
    main()
