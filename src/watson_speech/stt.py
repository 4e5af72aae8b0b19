"""Client for the IBM Watson Speech to Text model catalogue."""
from typing import List, Optional, Union

from .client import Operation, ResourceClient, json_body, json_list
from .errors import error_map
from .formats import SpeechModel
from .models import Model


class SpeechToText(ResourceClient):
    def _list_models_op(self) -> Operation:
        return Operation(
            "GET",
            "v1/models",
            errors=error_map(406, 415, 500, 503),
            decode=json_list(Model.from_dict, "models"),
        )

    def list_models(self, *, timeout: Optional[float] = None) -> List[Model]:
        """List every base model the service offers."""
        return self._call(self._list_models_op(), timeout)

    async def list_models_async(self, *, timeout: Optional[float] = None) -> List[Model]:
        return await self._acall(self._list_models_op(), timeout)

    def _get_model_op(self, model: Union[SpeechModel, str]) -> Operation:
        model_id = model.id() if isinstance(model, SpeechModel) else SpeechModel(model).id()
        return Operation(
            "GET",
            "v1/models/{model_id}",
            path_params={"model_id": model_id},
            errors=error_map(404, 406, 415, 500, 503),
            decode=json_body(Model.from_dict),
            resource_id=model_id,
        )

    def get_model(self, model: Union[SpeechModel, str], *, timeout: Optional[float] = None) -> Model:
        """Get one base model; an unknown id raises NotFound naming it."""
        return self._call(self._get_model_op(model), timeout)

    async def get_model_async(self, model: Union[SpeechModel, str], *, timeout: Optional[float] = None) -> Model:
        return await self._acall(self._get_model_op(model), timeout)
