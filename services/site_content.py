"""Static copy for the landing page service cards and process steps."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class ContentBlock:
    """A card or step: outline icon path data, a title and one line of copy."""

    title: str
    description: str
    icon_path: str


SERVICES: List[ContentBlock] = [
    ContentBlock(
        title="Paper & Cardboard",
        description="Newspapers, books, magazines, and all types of cardboard boxes.",
        icon_path=(
            "M12 7.5h1.5m-1.5 3h1.5m-7.5 3h7.5m-7.5 3h7.5m3-9h3.375c.621 0 1.125-.504 1.125-1.125V10.5"
            "a1.125 1.125 0 00-1.125-1.125h-3.375M3 15h3.375c.621 0 1.125-.504 1.125-1.125V10.5"
            "a1.125 1.125 0 00-1.125-1.125H3M3 15V7.5a2.25 2.25 0 012.25-2.25h13.5A2.25 2.25 0 0121 7.5v7.5"
            "a2.25 2.25 0 01-2.25 2.25H5.25A2.25 2.25 0 013 15z"
        ),
    ),
    ContentBlock(
        title="Plastics",
        description="PET bottles, milk jugs, containers, and other household plastic items.",
        icon_path=(
            "M21 4.787a.75.75 0 00-1.01-.712l-7.22 3.011a.75.75 0 01-.54 0L4.01 4.075a.75.75 0 00-1.01.712"
            "v13.425a.75.75 0 001.01.712l7.22-3.011a.75.75 0 01.54 0l7.22 3.011a.75.75 0 001.01-.712V4.787z"
        ),
    ),
    ContentBlock(
        title="Metals",
        description="Iron, steel, aluminum cans, copper wires, and brass items.",
        icon_path=(
            "M3.478 5.408L2.25 6.634m18 0l-1.228-1.226M12 21.75V19.5M12 2.25V4.5m4.243 2.25l1.226-1.227"
            "M5.25 6.634l1.227-1.227M18.75 17.366l-1.227-1.226M6.477 17.366l-1.227 1.226M12 12"
            "a2.25 2.25 0 012.25 2.25V15a2.25 2.25 0 01-4.5 0v-.75A2.25 2.25 0 0112 12z"
        ),
    ),
    ContentBlock(
        title="E-Waste",
        description="Old laptops, mobile phones, chargers, TVs, and other electronics.",
        icon_path=(
            "M9 17.25v1.007a3 3 0 01-.879 2.122L7.5 21h9l-1.621-.621A3 3 0 0115 18.257V17.25m-6 0V15"
            "M15 5.25H9a3 3 0 00-3 3v3.75a3 3 0 003 3h6a3 3 0 003-3V8.25a3 3 0 00-3-3z"
        ),
    ),
]

PROCESS_STEPS: List[ContentBlock] = [
    ContentBlock(
        title="1: Schedule Pickup",
        description="Fill out our simple form to book a convenient time for collection.",
        icon_path=(
            "M6.75 3v2.25M17.25 3v2.25M3 18.75V7.5a2.25 2.25 0 012.25-2.25h13.5A2.25 2.25 0 0121 7.5"
            "v11.25m-18 0A2.25 2.25 0 005.25 21h13.5A2.25 2.25 0 0021 18.75m-18 0h18"
        ),
    ),
    ContentBlock(
        title="2: Kabaadiwala Arrives",
        description="A verified local scrap dealer arrives at your doorstep on time.",
        icon_path="M12 6v6h4.5m4.5 0a9 9 0 11-18 0 9 9 0 0118 0z",
    ),
    ContentBlock(
        title="3: Weigh & Get Paid",
        description="Your items are weighed transparently, and you receive instant cash.",
        icon_path=(
            "M12 6v12m-3-2.818l.879.659c1.171.879 3.07.879 4.242 0 1.172-.879 1.172-2.303 0-3.182"
            "C13.536 12.219 12.768 12 12 12c-.725 0-1.45-.22-2.003-.659-1.106-.879-1.106-2.303 0-3.182"
            "s2.9-.879 4.006 0l.415.33M21 12a9 9 0 11-18 0 9 9 0 0118 0z"
        ),
    ),
    ContentBlock(
        title="4: Eco-Friendly Recycling",
        description="Your scrap is sent for responsible recycling, protecting our planet.",
        icon_path=(
            "M12 21a9.004 9.004 0 008.716-6.747M12 21a9.004 9.004 0 01-8.716-6.747M12 21c2.485 0 4.5-4.03 "
            "4.5-9S14.485 3 12 3m0 18c-2.485 0-4.5-4.03-4.5-9S9.515 3 12 3m0 0a8.997 8.997 0 017.843 4.582"
            "M12 3a8.997 8.997 0 00-7.843 4.582"
        ),
    ),
]

# Units offered by the value calculator.
CALCULATOR_UNITS = ["kg", "pieces", "quintal"]
