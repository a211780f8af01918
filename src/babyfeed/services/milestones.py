"""Age-indexed developmental milestones."""

import math
from dataclasses import dataclass

from babyfeed.domain.insights import MilestoneRecord, MilestoneStatus

MAX_MILESTONES = 2


@dataclass(frozen=True)
class MilestoneEntry:
    """Catalog row covering ``[min_days, max_days)``."""

    min_days: int
    max_days: int
    icon: str
    title: str
    template: str
    topic: str

    def render(self, name: str) -> str:
        return self.template.format(name=name)


CATALOG: tuple[MilestoneEntry, ...] = (
    MilestoneEntry(
        0,
        14,
        "🌟",
        "First 2 Weeks",
        "{name} is adjusting to the world! Expect 8-12 feeds per day. Cluster "
        "feeding is completely normal. Weight may drop slightly before regaining.",
        "feeding",
    ),
    MilestoneEntry(
        14,
        21,
        "📈",
        "2-Week Growth Spurt",
        "Around 2 weeks, many babies have their first growth spurt. {name} may "
        "want to feed more frequently for 2-3 days. This is normal!",
        "growth",
    ),
    MilestoneEntry(
        21,
        35,
        "👀",
        "3-4 Week Milestone",
        "{name} can now focus on faces! Feeding sessions may get more "
        "interactive. Another growth spurt may happen around 3 weeks.",
        "development",
    ),
    MilestoneEntry(
        35,
        49,
        "📈",
        "6-Week Growth Spurt",
        "The 6-week growth spurt is one of the biggest! {name} may feed every "
        "1-2 hours for a few days. Stay hydrated and well-fed yourself.",
        "growth",
    ),
    MilestoneEntry(
        49,
        60,
        "😊",
        "7-8 Week Milestone",
        "{name} may start social smiling! Feeding intervals may begin "
        "stretching to 2.5-3 hours during the day.",
        "development",
    ),
    MilestoneEntry(
        60,
        90,
        "🌙",
        "2-3 Month Milestone",
        "{name}'s stomach is growing, so feeds may become less frequent but "
        "longer. Some babies start sleeping longer stretches at night.",
        "feeding",
    ),
    MilestoneEntry(
        84,
        98,
        "📈",
        "3-Month Growth Spurt",
        "Another growth spurt around 3 months. {name} may seem hungrier. Feed "
        "on demand and trust the process!",
        "growth",
    ),
    MilestoneEntry(
        90,
        120,
        "🤲",
        "3-4 Month Milestone",
        "{name} is starting to grasp objects and may bring hands to mouth "
        "more. Still too early for solids; breast milk or formula remains ideal.",
        "development",
    ),
    MilestoneEntry(
        120,
        150,
        "🪥",
        "4-5 Month Milestone",
        "{name} may show interest in what you're eating! Watch for signs of "
        "readiness for solids: good head control, sitting with support, "
        "reaching for food.",
        "feeding",
    ),
    MilestoneEntry(
        150,
        180,
        "🥄",
        "Almost Ready for Solids",
        "Around 6 months is when most babies are ready for complementary "
        "foods. Continue breast/bottle feeds as the primary nutrition source.",
        "feeding",
    ),
    MilestoneEntry(
        180,
        210,
        "🥕",
        "6-Month Milestone!",
        "Big milestone! {name} can likely start solids. Begin with "
        "single-ingredient purées. Milk remains the primary food source; "
        "solids are for exploration.",
        "feeding",
    ),
    MilestoneEntry(
        210,
        270,
        "🦷",
        "7-9 Month Milestone",
        "First teeth may appear! {name} can try soft finger foods. Feeding may "
        "become messier and more fun. Offer water in a sippy cup during meals.",
        "development",
    ),
    MilestoneEntry(
        270,
        365,
        "🎂",
        "Approaching First Birthday",
        "{name} is eating more solids and milk feeds are gradually decreasing. "
        "By 12 months, aim for 3 meals + 2 snacks alongside breast/bottle.",
        "feeding",
    ),
    MilestoneEntry(
        365,
        730,
        "🥳",
        "Toddler Stage!",
        "{name} is a toddler! Can now have whole cow's milk (if no allergies). "
        "Appetite may vary day to day, which is completely normal.",
        "feeding",
    ),
)


def compute_milestones(
    age_days: int | None,
    baby_name: str,
    catalog: tuple[MilestoneEntry, ...] = CATALOG,
) -> list[MilestoneRecord]:
    """Return the current milestone and the nearest upcoming one.

    Entries are scanned in catalog order; once two records have been
    collected no further upcoming entries are added.
    """
    if age_days is None or age_days < 0:
        return []

    records: list[MilestoneRecord] = []
    for entry in catalog:
        if entry.min_days <= age_days < entry.max_days:
            text = entry.render(baby_name)
            records.append(_record(entry, text, MilestoneStatus.CURRENT))
        elif age_days < entry.min_days and len(records) < MAX_MILESTONES:
            gap = _until(entry.min_days - age_days)
            text = f"Coming in ~{gap}: {entry.render(baby_name)}"
            records.append(_record(entry, text, MilestoneStatus.UPCOMING))
    return records[:MAX_MILESTONES]


def _until(days: int) -> str:
    if days < 7:
        return f"{days} days"
    return f"{math.ceil(days / 7)} weeks"


def _record(
    entry: MilestoneEntry, text: str, status: MilestoneStatus
) -> MilestoneRecord:
    return MilestoneRecord(
        min_days=entry.min_days,
        max_days=entry.max_days,
        icon=entry.icon,
        title=entry.title,
        text=text,
        topic=entry.topic,
        status=status,
    )
