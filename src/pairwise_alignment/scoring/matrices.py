"""
Amino acid substitution matrices not shipped with Biopython.

Tables are symmetric, so only the lower triangle (diagonal included) is
stored, in the usual NCBI residue order.
"""

from typing import Dict, Tuple

PAM160 = """
   A  R  N  D  C  Q  E  G  H  I  L  K  M  F  P  S  T  W  Y  V
A  2
R -2  6
N  0 -1  3
D  0 -2  2  4
C -2 -3 -4 -5  9
Q -1  1  0  1 -5  5
E  0 -2  1  3 -5  2  4
G  1 -3  0  0 -3 -2  0  4
H -2  1  2  0 -3  2  0 -3  6
I -1 -2 -2 -3 -2 -2 -2 -3 -3  5
L -2 -3 -3 -4 -6 -2 -3 -4 -2  2  5
K -2  3  1  0 -5  0 -1 -2 -1 -2 -3  4
M -1 -1 -2 -3 -5 -1 -2 -3 -3  2  3  0  7
F -3 -4 -3 -6 -5 -5 -5 -4 -2  0  1 -5  0  7
P  1 -1 -1 -2 -3  0 -1 -1 -1 -2 -3 -2 -2 -4  5
S  1 -1  1  0  0 -1  0  1 -1 -2 -3 -1 -2 -2  1  2
T  1 -1  0 -1 -2 -1 -1 -1 -2  0 -2  0 -1 -3  0  1  3
W -5  1 -4 -6 -7 -5 -7 -7 -3 -5 -2 -4 -4 -1 -5 -2 -5 12
Y -3 -4 -2 -4  0 -4 -4 -5  0 -2 -2 -4 -3  5 -5 -3 -3 -1  8
V  0 -3 -2 -3 -2 -2 -2 -2 -2  3  1 -3  1 -2 -1 -1  0 -6 -3  4
"""


def parse_lower_triangle(text: str) -> Dict[Tuple[str, str], int]:
    """
    Expand a lower-triangular table into a full symmetric mapping.

    Returns:
        Dictionary {(code1, code2): score} holding both orientations
    """
    lines = [line.split() for line in text.strip().splitlines() if line.strip()]
    header = lines[0]
    scores = {}

    for row_number, row in enumerate(lines[1:]):
        code, values = row[0], row[1:]
        if code != header[row_number] or len(values) != row_number + 1:
            raise ValueError(f"Malformed triangular table at row {code!r}")
        for col_number, value in enumerate(values):
            other = header[col_number]
            scores[(code, other)] = int(value)
            scores[(other, code)] = int(value)

    return scores


__all__ = ['PAM160', 'parse_lower_triangle']
