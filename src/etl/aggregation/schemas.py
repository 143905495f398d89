"""Data model for cast credit aggregation.

Defines the immutable appearance record, the identity group built
by the clusterer, and the snapshot holding the three derived views.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# =============================================================================
# APPEARANCE
# =============================================================================


@dataclass(frozen=True)
class Appearance:
    """One performer-in-role record within one movie's cast.

    Attributes:
        movie_title: Display title of the movie.
        performer_name: Credited performer name.
        role_label: Raw character label as credited.
    """

    movie_title: str
    performer_name: str
    role_label: str


# =============================================================================
# IDENTITY GROUP
# =============================================================================


@dataclass
class IdentityGroup:
    """Appearances judged to denote one character identity.

    The group is keyed by its first member's role label. Later members
    never change the label, even when they would be a better fit.

    Attributes:
        members: Appearances in join order (never empty).
    """

    members: list[Appearance] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.members:
            raise ValueError("IdentityGroup requires at least one member")

    @property
    def leader(self) -> Appearance:
        """First appearance that opened the group."""
        return self.members[0]

    @property
    def label(self) -> str:
        """Representative role label (the leader's)."""
        return self.members[0].role_label

    @property
    def performer_names(self) -> set[str]:
        """Distinct performer names within the group."""
        return {member.performer_name for member in self.members}

    def add(self, appearance: Appearance) -> None:
        """Append an appearance to the group.

        Args:
            appearance: Appearance judged to match the leader.
        """
        self.members.append(appearance)

    def __len__(self) -> int:
        return len(self.members)


# =============================================================================
# VIEW SNAPSHOT
# =============================================================================

PerformerToTitles = dict[str, list[str]]
PerformerToRoleGroups = dict[str, list[Appearance]]
RoleToPerformerAppearances = dict[str, list[Appearance]]


@dataclass(frozen=True)
class CreditViews:
    """Read-only snapshot of the three aggregated views.

    Built once, completely, before being published to callers.

    Attributes:
        performer_titles: Performer name to movie titles.
        performer_role_groups: Performer name to one representative
            appearance per distinct role (only performers with 2+ roles).
        role_performer_appearances: Representative role label to all
            appearances (only roles with 2+ distinct performers).
    """

    performer_titles: Mapping[str, list[str]]
    performer_role_groups: Mapping[str, list[Appearance]]
    role_performer_appearances: Mapping[str, list[Appearance]]

    @classmethod
    def freeze(
        cls,
        performer_titles: PerformerToTitles,
        performer_role_groups: PerformerToRoleGroups,
        role_performer_appearances: RoleToPerformerAppearances,
    ) -> "CreditViews":
        """Wrap freshly built views in read-only mappings."""
        return cls(
            performer_titles=MappingProxyType(performer_titles),
            performer_role_groups=MappingProxyType(performer_role_groups),
            role_performer_appearances=MappingProxyType(role_performer_appearances),
        )
