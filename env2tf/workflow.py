"""Generation workflow - the interactive sequence around parser and emitter.

States run strictly forward, one file operation per state:

    AWAIT_ENV_PATH -> AWAIT_TFVARS_PATH -> AWAIT_VARIABLES_TF_CHOICE
        -> [AWAIT_VARIABLES_TF_PATH] -> DONE

Each answer comes from the GenerationRequest when it is preset, otherwise
from the Prompter. The first Env2TfError aborts the run; files already
written by earlier states are left in place.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from env2tf.envfile import read_env_file
from env2tf.models import EnvSet
from env2tf.prompts import Prompter
from env2tf.terraform.emitter import TerraformEmitter
from env2tf.utils.logging import logger


class Step(Enum):
    AWAIT_ENV_PATH = "await_env_path"
    AWAIT_TFVARS_PATH = "await_tfvars_path"
    AWAIT_VARIABLES_TF_CHOICE = "await_variables_tf_choice"
    AWAIT_VARIABLES_TF_PATH = "await_variables_tf_path"
    DONE = "done"


@dataclass(frozen=True)
class GenerationRequest:
    """Answers supplied up front; None means "ask the user"."""

    env_path: str | None = None
    tfvars_path: str | None = None
    create_variables: bool | None = None
    variables_path: str | None = None


@dataclass
class GenerationResult:
    """What a completed run read and wrote."""

    env_path: Path
    env_auto_detected: bool
    env_set: EnvSet
    tfvars_path: Path
    variables_path: Path | None = None
    steps: list[Step] = field(default_factory=list)


class GenerationWorkflow:
    """Drive one ``.env`` to Terraform generation run."""

    def __init__(self, prompter: Prompter, emitter: TerraformEmitter, config: dict[str, Any]):
        self.prompter = prompter
        self.emitter = emitter
        self.paths = config["paths"]

    def run(self, request: GenerationRequest | None = None) -> GenerationResult:
        request = request or GenerationRequest()
        steps = [Step.AWAIT_ENV_PATH]

        env_path, auto_detected = self._resolve_env_path(request)
        env_set = read_env_file(env_path)

        steps.append(Step.AWAIT_TFVARS_PATH)
        tfvars_path = Path(
            request.tfvars_path
            or self.prompter.prompt_string(
                "Enter the path to save the .tfvars file",
                default=self.paths["tfvars_file"],
            )
        )
        self.emitter.write_tfvars(env_set, tfvars_path)

        steps.append(Step.AWAIT_VARIABLES_TF_CHOICE)
        create_variables = request.create_variables
        if create_variables is None:
            create_variables = self.prompter.prompt_confirm(
                "Do you want to generate a variables.tf file?",
                default=False,
            )

        variables_path = None
        if create_variables:
            steps.append(Step.AWAIT_VARIABLES_TF_PATH)
            variables_path = Path(
                request.variables_path
                or self.prompter.prompt_string(
                    "Enter the path to save variables.tf",
                    default=self.paths["variables_file"],
                )
            )
            self.emitter.write_variables_tf(env_set, variables_path)

        steps.append(Step.DONE)
        logger.debug("Generation finished after {count} steps", count=len(steps))

        return GenerationResult(
            env_path=env_path,
            env_auto_detected=auto_detected,
            env_set=env_set,
            tfvars_path=tfvars_path,
            variables_path=variables_path,
            steps=steps,
        )

    def _resolve_env_path(self, request: GenerationRequest) -> tuple[Path, bool]:
        if request.env_path:
            return Path(request.env_path), False

        default = Path(self.paths["env_file"])
        if default.is_file():
            logger.debug("Found env file at {path}", path=str(default))
            return default, True

        answer = self.prompter.prompt_string(
            f"{default} not found. Enter the path to your .env file",
            default=str(default),
        )
        return Path(answer), False
