# cipherbox

Classical ciphers for Python, plus a small JSON web service that exposes them.

## Ciphers

Every cipher object has `encrypt(text)` and `decrypt(text)`, both of which
return a string.

### Single-alphabet ciphers (`cipherbox.monoalphabetic`)

- `Caesar(shift)`: the alphabet rotated by `shift` places.
- `Affine(scale, shift)`: the letter at position `i` becomes the letter at
  `(scale * i + shift) mod 26`.
- `Atbash()`: the alphabet reversed.
- `ROT13()`: the alphabet rotated by thirteen places.
- `MonoalphabeticCipher(cipher_alphabet)`: the common base class; give it any
  26-character cipher alphabet.

Before working on a text these ciphers pass it through `clean(text)`, which
trims surrounding whitespace, lower-cases it and drops every character that is
not a letter, digit or whitespace. Digits and whitespace pass through
unchanged.

A `Caesar` or `Affine` whose parameters give a negative alphabet position (for
example a negative shift) raises `ValueError`. Decrypting with an `Affine` key
whose scale has no inverse modulo 26 raises `ValueError` for letters that never
occur in the cipher alphabet.

### Keyed ciphers (`cipherbox.keyed`)

- `Substitution(key)`: the distinct characters of the key, followed by the
  remaining letters of the alphabet, form the cipher alphabet. Text is
  lower-cased; non-letters pass through.
- `Polybius(alphabet, key, chars)`: a square built from the key and the
  alphabet; `encrypt` turns each letter found in the square into a pair of
  coordinate characters taken from `chars` and drops everything else. `decrypt`
  reads the pairs back on a square five wide and ignores a trailing unpaired
  character.
- `Autokey(key)`: a Vigenère variant whose keystream continues with the
  plaintext. Only letters are kept; everything else is dropped. Encrypting a
  text shorter than the key raises `ValueError`.

Two helpers are public as well: `unique_chars(text)` removes repeated
characters, keeping first occurrences, and `keyed_alphabet(word, alphabet)`
builds the keyed alphabet described above.

### Transposition ciphers (`cipherbox.transposition`)

- `Columnar(key)`: the text is written in rows under the key (repeated key
  characters removed), padded with spaces to complete the last row, and read
  out column by column in the alphabetical order of the key characters.
  `decrypt` trims surrounding whitespace from the result. An empty key raises
  `ValueError`.
- `RailFence(rails)`: the text is written in a zigzag across `rails` rails and
  read rail by rail. With one rail or fewer the text is returned unchanged.

### Example

```python
from cipherbox.monoalphabetic import Caesar
from cipherbox.keyed import Autokey
from cipherbox.transposition import RailFence

Caesar(5).encrypt("attack at dawn")          # 'fyyfhp fy ifbs'
Autokey("fortification").decrypt("iswxvibjexiggzeqpbimoigakmhe")
# 'defendtheeastwallofthecastle'
RailFence(3).encrypt("defend the east wall of the castle")
# 'dnhaw tcleedtees alo h atef  tlfes'
```

## Web service

Install the package, then start the server:

```
pip install .
cipherbox-server
```

By default it listens on `0.0.0.0`, port 8080; `--host` and `--port` change
that. It runs on Flask's built-in server.

Each cipher has two routes, `POST /<cipher>/encrypt` and
`POST /<cipher>/decrypt`. Send a JSON body with `plaintext` (for encrypt) or
`ciphertext` (for decrypt) and the cipher's parameters:

| Cipher         | Parameters                                    |
|----------------|-----------------------------------------------|
| `atbash`       | none                                          |
| `rot13`        | none                                          |
| `caesar`       | `shift` (integer)                             |
| `affine`       | `scale`, `shift` (integers)                   |
| `railfence`    | `rails` (integer)                             |
| `polybius`     | `alphabet`, `key`, `chars` (strings)          |
| `substitution` | `key` (string)                                |
| `columnar`     | `key` (string)                                |
| `autokey`      | `key` (string)                                |

```
curl -X POST localhost:8080/caesar/encrypt \
     -H 'Content-Type: application/json' \
     -d '{"plaintext": "attack at dawn", "shift": 5}'
{"ciphertext": "fyyfhp fy ifbs"}
```

Every field is required. A body that is not a JSON object, lacks a field, gives
a field the wrong type, or gives it an empty string or the integer `0` gets a
400 response `{"error": "invalid input"}`. When a cipher itself rejects its
input (see the `ValueError` cases above) the response is a 500 with
`{"error": "internal error"}`.

Cross-origin requests from any origin are allowed; preflight `OPTIONS`
requests are answered for `GET` and `POST`.

To build the application in your own code, call `cipherbox.server.create_app()`.

## Tests

```
pip install .[test]
pytest
```