import sys

from accessible_tab import convert
from accessible_tab.tab_parser import parse

text = """Intro
e|-------0-----|
B|-----1---1---|
G|---2-------2-|
D|-3-----------|
A|-------------|
E|-------------|
"""
sys.stdout.write(convert(text) + "\n")

# Access note groups directly
data = parse(text)
for group in data.sequences[0].notes:
    frets = ", ".join(f"{n.string_name}={n.fret}" for n in group.notes)
    sys.stdout.write(f"column {group.position}: {frets}\n")
