import enum


class OutOfRangePolicy(str, enum.Enum):
    clamp = "clamp"
    exclude = "exclude"


class TieBreak(str, enum.Enum):
    team_id = "team_id"
    submitted_at = "submitted_at"


class IssueKind(str, enum.Enum):
    missing_reference = "missing_reference"
    invalid_criterion = "invalid_criterion"
    out_of_range_score = "out_of_range_score"


class TeamStatus(str, enum.Enum):
    forming = "FORMING"
    complete = "COMPLETE"
    submitted = "SUBMITTED"
