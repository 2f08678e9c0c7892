"""Tests for the generation workflow state machine."""

import copy

import pytest

from env2tf.config_runtime import DEFAULTS
from env2tf.errors import InputNotFoundError, OutputUnwritableError
from env2tf.terraform import TerraformEmitter
from env2tf.workflow import GenerationRequest, GenerationWorkflow, Step

from conftest import ScriptedPrompter


def _workflow(prompter, **render):
    return GenerationWorkflow(prompter, TerraformEmitter(**render), copy.deepcopy(DEFAULTS))


class TestInteractiveRun:
    """Every answer comes from the prompter."""

    def test_auto_detect_env_and_create_variables(self, in_tmp):
        (in_tmp / ".env").write_text("PORT=8080 # HTTP port\n", encoding="utf-8")
        prompter = ScriptedPrompter(strings=["output.tfvars", "vars.tf"], confirms=[True])

        result = _workflow(prompter).run()

        assert result.env_auto_detected is True
        assert result.steps == [
            Step.AWAIT_ENV_PATH,
            Step.AWAIT_TFVARS_PATH,
            Step.AWAIT_VARIABLES_TF_CHOICE,
            Step.AWAIT_VARIABLES_TF_PATH,
            Step.DONE,
        ]
        assert (in_tmp / "output.tfvars").read_text(encoding="utf-8") == 'PORT = "8080"\n'
        assert 'description = "HTTP port"' in (in_tmp / "vars.tf").read_text(encoding="utf-8")
        assert result.variables_path.name == "vars.tf"
        # No prompt was spent on the env path
        assert [kind for kind, _, _ in prompter.asked] == ["string", "confirm", "string"]

    def test_manual_env_path_and_decline_variables(self, in_tmp):
        config_dir = in_tmp / "config"
        config_dir.mkdir()
        (config_dir / ".env").write_text("A=1\n", encoding="utf-8")
        prompter = ScriptedPrompter(strings=["config/.env", "output.tfvars"], confirms=[False])

        result = _workflow(prompter).run()

        assert result.env_auto_detected is False
        assert result.variables_path is None
        assert result.steps[-2:] == [Step.AWAIT_VARIABLES_TF_CHOICE, Step.DONE]
        assert not (in_tmp / "variables.tf").exists()
        assert (in_tmp / "output.tfvars").exists()

    def test_prompts_offer_configured_defaults(self, in_tmp):
        (in_tmp / ".env").write_text("A=1\n", encoding="utf-8")
        prompter = ScriptedPrompter(strings=["t.tfvars", "v.tf"], confirms=[True])

        _workflow(prompter).run()

        defaults = [default for _, _, default in prompter.asked]
        assert defaults == ["./terraform.tfvars", False, "./variables.tf"]


class TestPresetRequest:
    """Preset answers skip their prompts."""

    def test_fully_preset_run_never_prompts(self, sample_env, tmp_path):
        request = GenerationRequest(
            env_path=str(sample_env),
            tfvars_path=str(tmp_path / "out.tfvars"),
            create_variables=True,
            variables_path=str(tmp_path / "out.tf"),
        )
        prompter = ScriptedPrompter()

        result = _workflow(prompter, description_fallback="No description available").run(request)

        assert prompter.asked == []
        assert len(result.env_set) == 4
        assert (tmp_path / "out.tf").read_text(encoding="utf-8").count("No description available") == 2

    def test_preset_no_variables(self, sample_env, tmp_path):
        request = GenerationRequest(
            env_path=str(sample_env),
            tfvars_path=str(tmp_path / "out.tfvars"),
            create_variables=False,
        )

        result = _workflow(ScriptedPrompter()).run(request)

        assert Step.AWAIT_VARIABLES_TF_PATH not in result.steps


class TestFailures:
    """The first I/O error ends the run."""

    def test_missing_env_file(self, in_tmp):
        prompter = ScriptedPrompter(strings=["does-not-exist.env"])

        with pytest.raises(InputNotFoundError):
            _workflow(prompter).run()

        # Nothing asked after the failed read
        assert len(prompter.asked) == 1

    def test_unwritable_tfvars_stops_before_confirm(self, sample_env, tmp_path):
        request = GenerationRequest(env_path=str(sample_env), tfvars_path=str(tmp_path / "no" / "x.tfvars"))
        prompter = ScriptedPrompter()

        with pytest.raises(OutputUnwritableError):
            _workflow(prompter).run(request)

        assert prompter.asked == []

    def test_unwritable_variables_keeps_tfvars(self, sample_env, tmp_path):
        request = GenerationRequest(
            env_path=str(sample_env),
            tfvars_path=str(tmp_path / "ok.tfvars"),
            create_variables=True,
            variables_path=str(tmp_path / "missing-dir" / "variables.tf"),
        )

        with pytest.raises(OutputUnwritableError):
            _workflow(ScriptedPrompter()).run(request)

        assert (tmp_path / "ok.tfvars").exists()
