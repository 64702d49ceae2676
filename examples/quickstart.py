"""Quickstart example for fmtengine.

This example demonstrates basic usage of fmtengine for template formatting:
references, alignment, numbers, truncation, locale numbers and errors.
"""

from fmtengine import (
    FormatError,
    MissingKeyError,
    TemplateFormatter,
    format_template,
    parse_placeholders,
)

# Example 1: Positional and named references
print("=" * 50)
print("Example 1: References")
print("=" * 50)

print(format_template("{} + {} = {}", [1, 2, 3]))
# Output: 1 + 2 = 3

print(format_template("{1}{}", ["a", "b", "c"]))
# Output: bc  ({1} moves the automatic cursor to index 2)

print(format_template("Hello, {name}!", named={"name": "Alice"}))
# Output: Hello, Alice!

print(format_template("{'first name'} {\"it's\"}", named={"first name": "Bob", "it's": "ok"}))
# Output: Bob ok

# Example 2: Width, fill and alignment
print("\n" + "=" * 50)
print("Example 2: Alignment")
print("=" * 50)

print(format_template("[{:*<6}] [{:*>6}] [{:*^6}]", ["ab", "ab", "ab"]))
# Output: [ab****] [****ab] [**ab**]

print(format_template("[{:>{}}]", ["x", 5]))
# Output: [    x]  (width taken from the next positional argument)

# Example 3: Numbers
print("\n" + "=" * 50)
print("Example 3: Numbers")
print("=" * 50)

print(format_template("{:,d}", [1234567]))
# Output: 1,234,567

print(format_template("{:+06d}", [42]))
# Output: +00042

print(format_template("{:#x} {:#X} {:_b}", [255, 255, 1234]))
# Output: 0xff 0xFF 100_1101_0010

print(format_template("{:.2f} {:.3e} {:g} {:#g}", [3.14159, 1234.5, 2.5, 2.5]))
# Output: 3.14 1.234e+03 2.5 2.50000

print(format_template("{} {}", [float("nan"), float("-inf")]))
# Output: nan -inf

# Example 4: Grapheme-aware truncation
print("\n" + "=" * 50)
print("Example 4: Truncation")
print("=" * 50)

print(format_template("{:.5s}", ["hello world"]))
# Output: hello

print(format_template("{:#.5s}", ["hello world"]))
# Output: hell…

# Example 5: Locale numbers
print("\n" + "=" * 50)
print("Example 5: Locale Numbers")
print("=" * 50)

for code in ("en_US", "de_DE", "fr_FR"):
    formatter = TemplateFormatter(code)
    print(f"{code}: {formatter.format('{:,n} / {:,.4n}', [1234567, 1234.5678])}")
# Output: en_US: 1,234,567 / 1,235
#         de_DE: 1.234.567 / 1.235
#         fr_FR: 1 234 567 / 1 235

# Example 6: Introspection
print("\n" + "=" * 50)
print("Example 6: Introspection")
print("=" * 50)

for placeholder in parse_placeholders("Total: {amount:>10,.2f} {unit}"):
    print(f"{placeholder.source!r}: ref={placeholder.argument.raw!r} spec={placeholder.specifier}")

# Example 7: Errors
print("\n" + "=" * 50)
print("Example 7: Errors")
print("=" * 50)

try:
    format_template("Hello, {name}!", named={"nmae": "typo"})
except MissingKeyError as e:
    print(e)

try:
    format_template("{:d}", ["not a number"])
except FormatError as e:
    print(e)

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
