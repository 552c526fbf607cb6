from pydantic import BaseModel, Field
from typing import Any

class GenerationParams(BaseModel):
    """
    Parameters for configuring a single call to the remote model.

    Attributes:
        model_id (str): The identifier of the model to use for the request.
        system_prompt (str | None): Optional system instruction to guide the model's behavior. Defaults to None.
        max_output_tokens (int): The maximum number of tokens the model should generate. Defaults to 2048.
        temperature (float | None): The sampling temperature to control randomness. Defaults to None.
        additional_params (dict[str, Any]): Any additional provider-specific parameters. Defaults to an empty dictionary.
    """
    model_id: str = Field(description="The model to use for the request.")
    system_prompt: str | None = Field(description="The system instruction to use for the generation.", default=None)
    max_output_tokens: int = Field(description="The maximum number of tokens to output.", default=2048)
    temperature: float | None = Field(description="The temperature to use for the generation.", default=None)
    additional_params: dict[str, Any] = Field(description="Additional parameters to use for the generation.", default_factory=dict)

    def __str__(self) -> str:
        """
        Returns a string representation of the GenerationParams object.

        Returns:
            str: A string description of the object's attributes.
        """
        return f"GenerationParams(model_id={self.model_id}, system_prompt={self.system_prompt}, max_output_tokens={self.max_output_tokens}, temperature={self.temperature}, additional_params={self.additional_params})"

    def __repr__(self) -> str:
        return self.__str__()
