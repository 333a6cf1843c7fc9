import sys

from chord_fingering import generate_chord_fingerings, generate_tab_notation, transpose_chord

progression = ["G", "D/F#", "Em7", "Cadd9"]

# Default fingering of each chord as tab
for name in progression:
    fingerings = generate_chord_fingerings(name)
    if not fingerings:
        sys.stdout.write(f"{name}: no diagram\n")
        continue
    default = fingerings[0]
    sys.stdout.write(f"{name} ({default.shape}, {default.difficulty})\n")
    sys.stdout.write(generate_tab_notation(default) + "\n\n")

# Same progression two semitones up
sys.stdout.write(" ".join(transpose_chord(name, 2) for name in progression) + "\n")
