"""Command line: solve a problem from standard input or score a contestant's answer."""

import argparse
import sys
from pathlib import Path

from pragemastik import (
    belah_bilangan,
    cari_ganjil,
    closest_cell,
    hari_tersibuk,
    hitung_jajargenjang,
    jarak_benteng,
    jembatan_layang,
    jenga,
    kepulauan,
    kotak_pensil,
    maksimalkan_xor,
    membuat_permutasi,
    mengisi_pohon,
    menjadi_pustakawan,
    perayaan_ketiga,
    pertahanan_ganesha,
    piramid,
    sepasang_bintang,
    taman_bilangan,
    tekan_satu,
)

SOLVERS = {
    "belah-bilangan": belah_bilangan.run,
    "cari-ganjil": cari_ganjil.run,
    "closest-cell": closest_cell.run,
    "hari-tersibuk": hari_tersibuk.run,
    "hitung-jajargenjang": hitung_jajargenjang.run,
    "jarak-benteng": jarak_benteng.run,
    "jembatan-layang": jembatan_layang.run,
    "jenga": jenga.run,
    "kepulauan": kepulauan.run,
    "kotak-pensil": kotak_pensil.run,
    "maksimalkan-xor": maksimalkan_xor.run,
    "membuat-permutasi": membuat_permutasi.run,
    "mengisi-pohon": mengisi_pohon.run,
    "menjadi-pustakawan": menjadi_pustakawan.run,
    "perayaan-ketiga": perayaan_ketiga.run,
    "pertahanan-ganesha": pertahanan_ganesha.run,
    "piramid": piramid.run,
    "sepasang-bintang": sepasang_bintang.run,
    "taman-bilangan": taman_bilangan.run,
    "tekan-satu": tekan_satu.run,
}

SCORERS = {
    "cari-ganjil": cari_ganjil.score,
    "mengisi-pohon": mengisi_pohon.score,
}


def _parser():
    parser = argparse.ArgumentParser(prog="pragemastik", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    solve = commands.add_parser("solve", help="solve the input read from standard input")
    solve.add_argument("problem", choices=sorted(SOLVERS))

    score = commands.add_parser("score", help="judge a contestant's output and print AC or WA")
    score.add_argument("problem", choices=sorted(SCORERS))
    score.add_argument("test_input", type=Path)
    score.add_argument("test_output", type=Path)
    score.add_argument("contestant_output", type=Path)
    return parser


def main(argv=None):
    """Run the command line and return the exit status."""
    parser = _parser()
    args = parser.parse_args(argv)
    if args.command == "solve":
        sys.stdout.write(SOLVERS[args.problem](sys.stdin.read()))
        return 0

    try:
        texts = [path.read_text() for path in (args.test_input, args.test_output, args.contestant_output)]
    except OSError as exc:
        parser.error(str(exc))
    try:
        verdict = SCORERS[args.problem](*texts)
    except ValueError as exc:
        print(f"pragemastik: {exc}", file=sys.stderr)
        return 1
    print(verdict)
    return 0


if __name__ == "__main__":
    sys.exit(main())