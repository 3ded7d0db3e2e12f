from typing import Any, Generic, TypeVar

from beanie import Document, PydanticObjectId
from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel

ModelType = TypeVar("ModelType", bound=Document)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDError(Exception):
    pass


def object_ids(ids: list[str]) -> list[PydanticObjectId]:
    """Convert string ids to ObjectIds, dropping the ones that are not valid ObjectIds."""
    return [PydanticObjectId(id) for id in ids if PydanticObjectId.is_valid(id)]


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    def __init__(self, model: type[ModelType]):
        """
        CRUD object with default methods to Read and Update.

        **Parameters**

        * `model`: A Beanie model class
        """
        self.model = model

    async def get(self, id: Any) -> ModelType | None:
        if isinstance(id, str) and not PydanticObjectId.is_valid(id):
            return None
        return await self.model.get(id)

    async def update(self, *, db_obj: ModelType, obj_in: UpdateSchemaType | dict[str, Any]) -> ModelType:
        obj_data = jsonable_encoder(db_obj)
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)
        for field in obj_data:
            if field in update_data:
                setattr(db_obj, field, update_data[field])
        await db_obj.save()
        return db_obj
