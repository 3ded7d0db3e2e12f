from pathlib import Path

import click
import pandas as pd
import tqdm

from app import schemas

from .admin_client import AdminClient, AdminClientSettings


def read_criteria(filename: Path) -> list[schemas.CriterionCreate]:
    df = pd.read_csv(filename)
    criteria = []
    for _, row in df.iterrows():
        description = row["Description"]
        criteria.append(
            schemas.CriterionCreate(
                name=str(row["Name"]).strip(),
                description=str(description).strip() if not pd.isna(description) else str(row["Name"]).strip(),
                max_points=int(row["Max points"]),
                weight=float(row["Weight"]),
            )
        )
    return criteria


def create_criteria(event_id: str, filename: Path, client: AdminClient):
    existing_names = {criterion.name for criterion in client.get_criteria(event_id)}
    for criterion in tqdm.tqdm(read_criteria(filename)):
        if criterion.name in existing_names:
            print(f"Criterion {criterion.name} already exists")
            continue
        created = client.create_criterion(event_id, criterion)
        existing_names.add(created.name)
        print(f"Created criterion {created.name} ({created.id})")


@click.command()
@click.option("--event_id", help="The event the criteria belong to", type=str, required=True)
@click.option("--file_path", help="CSV with columns Name, Description, Max points, Weight", type=Path)
@click.option("--env_file", help=".env file to use", default=".env.admin", type=str)
def cli(event_id: str, file_path: Path, env_file: str):
    create_criteria(event_id, file_path, AdminClient(AdminClientSettings(_env_file=env_file)))


if __name__ == "__main__":
    cli()
