# Prompt fragments for NPC name generation.
# Two profiles: "minimal" (persona + task) and "guided" (persona + rules + task).

from typing import List

from ..errors import ConfigError
from .types import Message

PROFILES = ("minimal", "guided")

PERSONA_PROMPT = """\
You are an expert NPC generator for games like D&D.
You have freedom to be creative to get the best possible output.
"""

GENERATION_RULES = """\
## Suggested Generation Rules

For generating consistent names, here are some guidelines:

### Dwarves
- Favor hard consonants (k, t, d, g)
- Use short, punchy sounds
- Incorporate references to metals, stones, forging
- Clan names often hyphenated or compound words
- Common suffixes: -in, -or, -ar, -im

### Elves
- Favor fluid consonants (l, n, r)
- Use many vowels
- Incorporate nature and star references
- Names typically long and melodious
- Common prefixes: El-, Cel-, Gal-
- Common suffixes: -il, -iel, -or, -ion

### Humans
- Greater variety of sounds
- Mix of short and long names
- Can borrow elements from other races
- Family names often descriptive or location-based
- Common suffixes: -or, -wyn, -iel
- Common prefixes: Theo-, El-, Ar-

## Usage Notes
Names can be modified or combined to create new variations while maintaining the essence of each race.

### Pattern Examples
- Dwarf: [Hard Consonant] + [Short Vowel] + [Hard Consonant] + [Suffix]
- Elf: [Nature Word] + [Fluid Consonant] + [Long Vowel] + [Melodic Ending]
- Human: [Strong Consonant] + [Vowel] + [Cultural Suffix]

### Cultural Considerations
- Dwarf names often reflect their crafts or achievements
- Elf names might change throughout their long lives
- Human names vary by region and social status
"""


def build_user_prompt(kind: str) -> str:
    return f"Generate a random name for an {kind} (kind always equals {kind})."


def build_messages(kind: str, profile: str = "minimal") -> List[Message]:
    if profile not in PROFILES:
        raise ConfigError(f"unknown prompt profile {profile!r} (expected one of {', '.join(PROFILES)})")
    messages = [Message(role="system", content=PERSONA_PROMPT)]
    if profile == "guided":
        messages.append(Message(role="system", content=GENERATION_RULES))
    messages.append(Message(role="user", content=build_user_prompt(kind)))
    return messages
