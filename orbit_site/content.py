"""
Landing page copy for the ORBIT1 mission site.
"""

from orbit_site.models import MissionItem, PageMeta, SpecItem, TimelineEntry

TAGLINE = "Going to orbit. Open source. 2026."
TAGLINE_JA = "民間から宇宙へ。全過程を公開する。"

PAGE_META = PageMeta(
    title=f"ORBIT1 — {TAGLINE}",
    description=(
        "A civilian mission to launch a CubeSat into orbit by December 2026. "
        "Every step, open source."
    ),
    og_title="ORBIT1",
    og_description=TAGLINE,
    twitter_title="ORBIT1",
    twitter_description=TAGLINE,
)

MISSION = [
    MissionItem(
        label="WHAT",
        text=(
            "1U CubeSat technology demonstration mission. Proving that a small "
            "team with software DNA can reach orbit."
        ),
    ),
    MissionItem(
        label="WHEN",
        text="Target launch: December 2026. From zero to orbit in under 10 months.",
    ),
    MissionItem(
        label="HOW",
        text="Open source from Day 0. Every decision, every milestone, every failure — public.",
    ),
    MissionItem(
        label="WHY",
        text=(
            "To prove the barrier to space is lower than anyone thinks. "
            "If we can do it, so can you."
        ),
    ),
]

TIMELINE = [
    TimelineEntry(
        phase="DAY 0",
        date="March 2026",
        title="Public declaration",
        desc="Open-source repo. Real-time satellite tracking. The mission starts now.",
        active=True,
    ),
    TimelineEntry(
        phase="PHASE 1",
        date="Mar — Apr 2026",
        title="Mission definition",
        desc="Payload spec. Orbit selection. Regulatory filing with Japanese authorities.",
    ),
    TimelineEntry(
        phase="PHASE 2",
        date="Apr — May 2026",
        title="Satellite procurement",
        desc="CubeSat bus selection. Component procurement. Ground station setup.",
    ),
    TimelineEntry(
        phase="PHASE 3",
        date="May — Sep 2026",
        title="Build & test",
        desc="Assembly. Environmental testing. Flight software development.",
    ),
    TimelineEntry(
        phase="PHASE 4",
        date="Sep — Oct 2026",
        title="Launch integration",
        desc="Rideshare slot. Vehicle integration. Final review.",
    ),
    TimelineEntry(
        phase="PHASE 5",
        date="Nov — Dec 2026",
        title="LAUNCH",
        desc="Orbit insertion. First contact. Mission operations begin.",
    ),
]

SPECS = [
    SpecItem(label="Form factor", value="1U CubeSat"),
    SpecItem(label="Size", value="10 × 10 × 10 cm"),
    SpecItem(label="Mass", value="< 1.33 kg"),
    SpecItem(label="Orbit", value="LEO ~500 km SSO"),
    SpecItem(label="Inclination", value="97.4°"),
    SpecItem(label="Mission life", value="TBD"),
]

CTA_TITLE = "Follow the mission."
CTA_TEXT = "Star the repo. Watch the progress. Join the journey."
FOOTER_TEXT = "ORBIT1 — Day 0: March 1, 2026"


def page_context(repo_url: str) -> dict:
    """Template variables for the landing page."""
    return {
        "meta": PAGE_META,
        "tagline": TAGLINE,
        "tagline_ja": TAGLINE_JA,
        "mission": MISSION,
        "timeline": TIMELINE,
        "specs": SPECS,
        "cta_title": CTA_TITLE,
        "cta_text": CTA_TEXT,
        "repo_url": repo_url,
        "footer_text": FOOTER_TEXT,
    }
