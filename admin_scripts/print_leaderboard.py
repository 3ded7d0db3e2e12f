import click
import pandas as pd

from app import schemas

from .admin_client import AdminClient, AdminClientSettings


def leaderboard_table(result: schemas.LeaderboardResult) -> pd.DataFrame:
    rows = []
    for entry in result.leaderboard:
        row = {
            "Rank": entry.rank,
            "Team": entry.team.name if entry.team is not None else entry.team_id,
            "Project": entry.submission.title if entry.submission is not None else "",
            "Score": entry.final_score,
            "Judges": entry.total_judges,
        }
        for criterion_score in entry.criteria_scores:
            row[criterion_score.criteria_name] = round(criterion_score.normalized_score, 2)
        rows.append(row)
    return pd.DataFrame(rows)


@click.command()
@click.option("--event_id", help="The event to show the leaderboard of", type=str, required=True)
@click.option("--show_issues", is_flag=True, help="Also print the records that could not be scored as-is.")
@click.option("--env_file", help=".env file to use", default=".env.admin", type=str)
def cli(event_id: str, show_issues: bool, env_file: str):
    result = AdminClient(AdminClientSettings(_env_file=env_file)).get_leaderboard(event_id)
    if not result.leaderboard:
        print(f"No submissions for event {event_id}")
        return
    print(leaderboard_table(result).to_string(index=False))
    if show_issues:
        for issue in result.issues:
            print(f"[{issue.kind.value}] {issue.detail}")


if __name__ == "__main__":
    cli()
