api_description = """
Scoring and leaderboard API for hackathon events.

Judges score each submitted team on the scoring criteria the organizers defined for the event. The leaderboard
averages the judges' points per criterion, rescales every criterion to 0-100, and combines them with the criteria
weights. Criteria nobody has scored yet for a team are left out of that team's average instead of counting as zero.

Only teams that submitted a project appear on the leaderboard.
"""


tags_metadata = [
    {
        "name": "leaderboard",
        "description": "Ranked standings of the teams of an event, with the per-criterion breakdown. Records that "
        "could not be used as-is (unknown teams, invalid criteria, out of range points) are listed under `issues`.",
    },
    {
        "name": "scoring-criteria",
        "description": "List and create the criteria teams are judged on. Each has a maximum number of points per "
        "judge and a relative weight.",
    },
    {
        "name": "scores",
        "description": "Submit and list judge scores for a submission. Submitting again for the same judge and "
        "criterion replaces the previous score.",
    },
]
