import pytest

from synapse_docs.domains.documentation.entities import Wizard, WizardStep


@pytest.fixture
def wizard():
    steps = [
        WizardStep(id=f"step-{n}", title=f"Step {n}", description="", content="")
        for n in range(3)
    ]
    return Wizard(id="w", title="Wizard", description="", steps=steps)


def test_starts_at_first_step(wizard):
    assert wizard.current_step == 0
    assert wizard.is_first
    assert not wizard.is_last
    assert wizard.progress_percent == 33


def test_next_step_clamps_at_end(wizard):
    wizard.next_step()
    wizard.next_step()
    assert wizard.is_last
    assert wizard.progress_percent == 100

    assert wizard.next_step().id == "step-2"
    assert wizard.current_step == 2


def test_previous_step_clamps_at_start(wizard):
    assert wizard.previous_step().id == "step-0"
    assert wizard.current_step == 0


def test_go_to(wizard):
    assert wizard.go_to("step-1").id == "step-1"
    assert wizard.current_step == 1

    assert wizard.go_to("missing") is None
    assert wizard.current_step == 1


def test_reset(wizard):
    wizard.go_to("step-2")
    assert wizard.reset().id == "step-0"


def test_wizard_requires_steps():
    with pytest.raises(ValueError):
        Wizard(id="w", title="t", description="", steps=[])


def test_service_wizard_content(service):
    state = service.wizard_state()

    assert state.total_steps == 5
    assert state.step_id == "welcome"
    assert state.is_first


def test_render_wizard_shows_current_step(service):
    service.wizard.go_to("installation")
    html = service.render_wizard()

    assert "<h2>Installation</h2>" in html
    assert "Step 2 of 5" in html
    assert 'data-action="previous"' in html
    assert 'data-action="next"' in html
    assert 'data-action="reset"' not in html


def test_wizard_state_exposes_step_details(service):
    state = service.wizard_state()

    assert state.step_type == "interactive"
    assert state.is_required is True
    assert state.user_preferences["language"] == "typescript"

    service.wizard.go_to("next-steps")
    assert service.wizard_state().is_required is False


def test_render_wizard_shows_step_type_and_preferences(service):
    service.wizard.go_to("next-steps")
    html = service.render_wizard()

    assert "<span>interactive</span><span>optional</span>" in html
    assert "<span>experience: beginner</span>" in html
