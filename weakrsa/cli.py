# -*- coding: utf-8 -*-
r"""
weakrsa command line.

Usage examples:
  weakrsa -n 59046883376179 -e 4044583 --decrypt "32279109612093,17838629182964"
  weakrsa --publickey pub.pem --decrypt C1 C2 --attack cycling
  weakrsa cipher.txt --max-iterations 1000000
  weakrsa --demo cycling
"""

import argparse
import logging
import sys
import textwrap
import threading
import time
from typing import Dict, List, Optional, Tuple

from .attacks import ALL_ATTACKS, Attack, AttackResult, PubKey, pick_attacks
from .config import ESTIMATED_SECONDS, AttackOptions
from .fixtures import DEMOS
from .parsing import expand_publickeys, load_keys_from_pem, parse_input_file, parse_ints
from .ui import Colors, banner, box, one_line, trim


def parse_args(argv=None):
    attack_names = ", ".join(a.name for a in sorted(ALL_ATTACKS, key=lambda x: x.priority))
    p = argparse.ArgumentParser(
        prog="weakrsa",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent(f"""
Examples:
  weakrsa -n N -e E --decrypt "C1,C2,C3"
  weakrsa --publickey pub.pem --decrypt C1 C2 --attack fermat
  weakrsa --demo fermat

Available attacks: [{attack_names}]

An input file may hold n = , e = , c = lines (c1 = , c2 = ... also work) and PEM keys.
""")
    )
    p.add_argument("--publickey", help="PEM path(s), comma-separated or wildcard", default=None)
    p.add_argument("-n", nargs="+", help="modulus N (dec/hex)", default=None)
    p.add_argument("-e", nargs="+", help="public exponent e (dec/hex)", default=None)
    p.add_argument("--decrypt", nargs="+", help="ciphertext blocks in order, comma- or space-separated", default=None)
    p.add_argument("--demo", choices=sorted(DEMOS), help="run against a built-in known ciphertext", default=None)
    p.add_argument("--attack", help="limit to one or more attacks (comma-separated)", default=None)
    p.add_argument("--max-iterations", type=int, default=None, help="give up after this many search steps")
    p.add_argument("--no-stop", action="store_true", help="do not stop on first success")
    p.add_argument("--verbosity", choices=["DEBUG", "INFO", "WARN", "ERROR"], default="INFO")
    p.add_argument("infile", nargs="?", help="optional input file with n/e/c values", default=None)
    return p.parse_args(argv)


def make_keys_from_ne(n_vals: List[int], e_vals: List[int], log) -> List[PubKey]:
    if not n_vals:
        return []
    if not e_vals:
        e_vals = [65537]
    keys = []
    for i, n in enumerate(n_vals):
        e = e_vals[i] if i < len(e_vals) else e_vals[0]
        keys.append(PubKey(n=n, e=e, label=f"N#{i}"))
        log.debug(f"Loaded key {i}: n={n}, e={e}")
    return keys


# ---------- Progress / threading wrapper ----------
class _AttackRunnerThread(threading.Thread):
    """Runs one attack off the main thread so the UI can spin and Ctrl+C can skip."""

    def __init__(self, attack: Attack, key: PubKey, c_list, options: AttackOptions, log):
        super().__init__(name=f"attack-{attack.name}", daemon=True)
        self._call = lambda: attack.run(key, c_list, options, log)
        self.attack_name = attack.name
        self.result: Optional[AttackResult] = None
        self.crash: Optional[BaseException] = None
        self.elapsed = 0.0

    def run(self):
        t0 = time.time()
        try:
            self.result = self._call()
        except Exception as ex:
            # RecoveryError never gets here; attacks turn it into a result
            self.crash = ex
            self.result = AttackResult(self.attack_name, False, info=f"error:{type(ex).__name__}")
        finally:
            self.elapsed = time.time() - t0


def _display_progress_loop(atk_name: str, est_seconds: float, thread: _AttackRunnerThread):
    """
    Single-line progress bar while the attack thread runs; switches to a
    spinner with elapsed seconds once the estimate is overrun.
    """
    width = 24
    start = time.time()
    spinner = "⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏"
    sp_i = 0
    try:
        while thread.is_alive():
            elapsed = time.time() - start
            if est_seconds > 0 and elapsed <= est_seconds:
                filled = int(min(1.0, elapsed / est_seconds) * width)
                bar = "[" + "#" * filled + "-" * (width - filled) + "]"
                sys.stdout.write(f"\r{Colors.DIM}{atk_name:12} {bar} ETA:{int(est_seconds - elapsed):3d}s{Colors.RESET}")
            else:
                ch = spinner[sp_i % len(spinner)]
                sys.stdout.write(f"\r{Colors.DIM}{atk_name:12} {ch} running... {int(elapsed):3d}s  (Ctrl+C skips){Colors.RESET}")
                sp_i += 1
            sys.stdout.flush()
            thread.join(timeout=0.18)
    finally:
        sys.stdout.write("\r" + " " * 72 + "\r")
        sys.stdout.flush()


def run_attack(atk: Attack, key: PubKey, c_list: List[int], options: AttackOptions, log) -> Optional[AttackResult]:
    """Run one attack on a worker thread. Returns None if the user skipped it."""
    runner = _AttackRunnerThread(atk, key, c_list, options, log)
    runner.start()
    try:
        if sys.stdout.isatty():
            _display_progress_loop(atk.name, ESTIMATED_SECONDS.get(atk.name, 5.0), runner)
        while runner.is_alive():
            runner.join(timeout=0.2)
    except KeyboardInterrupt:
        # a thread cannot be killed; the skipped search keeps its core busy until it ends
        log.warning(f"{Colors.YELLOW}[{atk.name}] skipped; its search keeps running in the background{Colors.RESET}")
        return None
    if runner.crash:
        log.debug(f"[{atk.name}] crashed after {runner.elapsed:.2f}s: {runner.crash!r}")
    return runner.result


def collect_inputs(args, log) -> Tuple[List[PubKey], List[int]]:
    keys: List[PubKey] = []
    c_list: List[int] = []

    if args.demo:
        n, e, blocks = DEMOS[args.demo]
        keys.append(PubKey(n=n, e=e, label=f"demo:{args.demo}"))
        c_list.extend(blocks)

    if args.publickey:
        keys.extend(load_keys_from_pem(expand_publickeys(args.publickey), log))

    if args.infile:
        file_keys, file_ciphers = parse_input_file(args.infile, log)
        keys.extend(file_keys)
        c_list.extend(file_ciphers)

    keys.extend(make_keys_from_ne(parse_ints(args.n), parse_ints(args.e), log))
    if args.decrypt:
        c_list.extend(parse_ints(args.decrypt))
    return keys, c_list


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.verbosity), format="%(message)s")
    log = logging.getLogger("weakrsa")

    print(banner())

    try:
        options = AttackOptions.from_args(args)
        attacks = pick_attacks(args.attack)
        keys, c_list = collect_inputs(args, log)
    except (OSError, ValueError) as ex:
        log.error(f"{Colors.RED}{ex}{Colors.RESET}")
        return 1

    if not keys:
        log.error(Colors.RED + "No public key provided. Use -n/-e, --publickey, --demo or an input file." + Colors.RESET)
        return 1
    if not c_list:
        log.error(Colors.RED + "No ciphertext blocks provided. Use --decrypt or an input file." + Colors.RESET)
        return 1
    key = keys[0]
    if len(keys) > 1:
        log.warning(f"{len(keys)} keys loaded; attacking {key.label or 'the first one'} only")

    summary_row = (f"Key: {key.label or '-'} | Blocks: {len(c_list)} | "
                   f"Attacks: {','.join(a.name for a in attacks)} | "
                   f"Max iterations: {options.max_iterations or 'unbounded'}")
    print(box("INPUT SUMMARY", [summary_row]))

    summary: List[Tuple[str, Optional[bool], str, float]] = []
    results_map: Dict[str, AttackResult] = {}
    found: Optional[AttackResult] = None

    try:
        for atk in attacks:
            if not atk.can_run(key, c_list):
                continue
            t0 = time.time()
            res = run_attack(atk, key, c_list, options, log)
            dt = time.time() - t0
            if res is None:
                summary.append((atk.name, None, "skipped", dt))
                print(one_line(None, atk.name, dt))
                continue
            results_map[atk.name] = res
            summary.append((atk.name, res.success, res.info, dt))
            print(one_line(res.success, atk.name, dt, note=str(res.error or res.info)))

            if res.success and found is None:
                found = res
                if options.stop_on_hit:
                    break
    except KeyboardInterrupt:
        print("\n" + Colors.RED + "Interrupted by user." + Colors.RESET)
        return 130

    lines = [f"{'Attack':<10} | {'Result':^6} | {'Text (trimmed)':<48} | Time", "-" * 80]
    for name, ok, note, dt in summary:
        result = "OK" if ok else ("SKIP" if ok is None else "NO")
        res = results_map.get(name)
        shown = trim(res.plaintext) if res and res.success else note
        lines.append(f"{name:<10} | {result:^6} | {shown:<48} | {dt:>5.2f}s")
    print()
    print(box("ATTACK SUMMARY", lines))
    print()

    if found is None:
        print(Colors.RED + Colors.BOLD + "❌ No plaintext recovered." + Colors.RESET)
        return 1

    print(Colors.GREEN + Colors.BOLD + "🎯 Plaintext recovered!" + Colors.RESET)
    print(f"{Colors.BOLD}{Colors.CYAN}By:{Colors.RESET}    {found.name}")
    print(f"{Colors.BOLD}{'-'*40}{Colors.RESET}")
    print(f"{Colors.BOLD}{Colors.GREEN}Text:  '{found.plaintext}'{Colors.RESET}")
    print(f"{Colors.BOLD}{'-'*40}{Colors.RESET}")
    if found.recovered_pq:
        p, q = found.recovered_pq
        print(f"{Colors.BOLD}p:{Colors.RESET}     {p}")
        print(f"{Colors.BOLD}q:{Colors.RESET}     {q}")
    if found.recovered_d:
        print(f"{Colors.BOLD}d:{Colors.RESET}     {found.recovered_d}")
    return 0
