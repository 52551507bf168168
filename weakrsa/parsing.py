# -*- coding: utf-8 -*-
"""Parse moduli, exponents and ciphertext blocks from arguments and files."""

import glob
import os
import re
from typing import List, Optional, Tuple

from Crypto.PublicKey import RSA

from .attacks import PubKey

_PEM_RE = re.compile(
    r'(-----BEGIN (?:PUBLIC|RSA PUBLIC) KEY-----.*?-----END (?:PUBLIC|RSA PUBLIC) KEY-----)', re.DOTALL
)
_KV_RE = re.compile(r'^\s*([A-Za-z][A-Za-z0-9_\-]*)\s*[:=]\s*(.+)$')


def parse_int_auto(s: str) -> int:
    s = s.strip().strip("\"'[]()")
    if s.lower().startswith("0x"):
        return int(s, 16)
    # allow underscores like Python literal 1_000
    return int(s.replace("_", ""))


def split_arg_tokens(arg_values: Optional[List[str]]) -> List[str]:
    """
    Accepts argparse token list (nargs='+') and splits comma-separated items,
    e.g. ["123,456", "789"] -> ["123","456","789"]
    """
    if not arg_values:
        return []
    out = []
    for tok in arg_values:
        out.extend(p.strip() for p in re.split(r"[,\s]+", tok) if p.strip())
    return out


def parse_ints(values: Optional[List[str]]) -> List[int]:
    return [parse_int_auto(t) for t in split_arg_tokens(values)]


def expand_publickeys(spec: str) -> List[str]:
    paths = []
    for token in spec.split(","):
        token = token.strip()
        if not token:
            continue
        if any(ch in token for ch in "*?[]"):
            paths.extend(sorted(glob.glob(token)))
        else:
            paths.append(token)
    # unique, order kept
    return list(dict.fromkeys(paths))


def load_keys_from_pem(paths: List[str], log) -> List[PubKey]:
    out = []
    for p in paths:
        try:
            with open(p, "rb") as fh:
                key = RSA.import_key(fh.read())
        except (OSError, ValueError, IndexError, TypeError) as ex:
            log.warning(f"Could not parse PEM {p}: {ex}")
            continue
        out.append(PubKey(n=int(key.n), e=int(key.e), label=os.path.basename(p)))
    return out


def parse_input_file(path: str, log) -> Tuple[List[PubKey], List[int]]:
    """
    Parse a text file holding:
      - PEM blocks (BEGIN PUBLIC KEY)
      - n = / e = / c = lines, '#' comments
      - several blocks per c line (comma or space separated) or c1, c2, ...
    Returns (keys, ciphers). Raises ValueError on a malformed number.
    """
    with open(path, "r", encoding="utf-8") as fh:
        txt = fh.read()

    keys: List[PubKey] = []
    c_list: List[int] = []
    label = os.path.basename(path)

    for i, pem in enumerate(_PEM_RE.findall(txt)):
        key = RSA.import_key(pem.encode())
        keys.append(PubKey(n=int(key.n), e=int(key.e), label=f"{label}:pem#{i}"))
        log.debug(f"Loaded PEM from file: n={int(key.n)} e={int(key.e)}")
    txt = _PEM_RE.sub("", txt)

    n_val: Optional[int] = None
    e_val: Optional[int] = None
    for lineno, line in enumerate(txt.splitlines(), 1):
        line = line.split("#", 1)[0].strip()
        if not line:
            continue
        m = _KV_RE.match(line)
        if not m:
            log.debug(f"{label}:{lineno}: ignored {line!r}")
            continue
        name, val = m.group(1).lower(), m.group(2)
        try:
            if name in ("n", "modulus"):
                n_val = parse_int_auto(val)
            elif name in ("e", "exponent"):
                e_val = parse_int_auto(val)
            elif re.fullmatch(r"(c|ct|ciphertext)[_\-]?\d*", name):
                c_list.extend(parse_ints([val]))
            else:
                log.debug(f"{label}:{lineno}: unknown key {name!r}")
        except ValueError as ex:
            raise ValueError(f"{label}:{lineno}: bad value for {name}: {ex}") from ex

    if n_val is not None:
        keys.append(PubKey(n=n_val, e=e_val if e_val is not None else 65537, label=label))
    elif e_val is not None:
        log.warning(f"{label}: e given without n, ignored")
    return keys, c_list
