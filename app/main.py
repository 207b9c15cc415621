"""
Streamlit Frontend for the SaveSmart Onboarding Form

A four-step budget profile: income, expenses, goals, review.

DESIGN PRINCIPLES:
1. Validate while the user types, show errors next to the field
2. Next is only enabled when the current section is complete
3. Progress is always visible
4. The draft is saved after every change and restored on reload
"""

import streamlit as st

from savesmart.forms import (
    FormController,
    IncomeSourceInput,
    ProgressIndicator,
    ValidationMessage,
)
from savesmart.models.profile import IncomeFrequency, IncomeSource
from savesmart.orchestrator import create_app_components, default_show_validation
from savesmart.validation import validation_engine


PREDEFINED_CATEGORIES = [
    "Housing",
    "Transportation",
    "Food",
    "Utilities",
    "Healthcare",
    "Entertainment",
    "Insurance",
    "Debt Payments",
]


# Page configuration
st.set_page_config(
    page_title="SaveSmart - Budget Profile",
    page_icon="💰",
    layout="centered",
)

st.markdown("""
<style>
    .validation-message {
        color: #b00020;
        font-size: 0.9em;
        margin: 4px 0 12px 0;
    }
    .validation-message__list {
        margin: 0;
        padding-left: 20px;
    }
    .progress-indicator__header {
        display: flex;
        justify-content: space-between;
        font-weight: 600;
    }
    .progress-indicator__bar-container {
        background-color: #e9ecef;
        border-radius: 6px;
        height: 10px;
        margin: 6px 0 20px 0;
    }
    .progress-indicator__bar-fill {
        background-color: #28a745;
        border-radius: 6px;
        height: 10px;
    }
</style>
""", unsafe_allow_html=True)


@st.cache_resource
def get_components():
    """Get or create application components (cached)."""
    try:
        return create_app_components(use_storage=True)
    except OSError as e:
        st.error(f"Draft storage unavailable: {e}")
        return create_app_components(use_storage=False)


def get_controller() -> FormController:
    if "controller" not in st.session_state:
        controller, _, _ = get_components()
        st.session_state.controller = controller
        st.session_state.income_inputs = {}
    return st.session_state.controller


def income_input_for(controller: FormController, source: IncomeSource, is_only: bool) -> IncomeSourceInput:
    """One IncomeSourceInput per source id, kept across reruns."""
    inputs: dict[str, IncomeSourceInput] = st.session_state.income_inputs
    binding = inputs.get(source.id)
    if binding is None:
        binding = IncomeSourceInput(
            on_change=lambda update, sid=source.id: controller.update_income_source(sid, update),
            on_remove=lambda sid=source.id: controller.remove_income_source(sid),
            source=source,
            is_only=is_only,
            show_validation=default_show_validation(),
        )
        inputs[source.id] = binding
    binding.is_only = is_only
    return binding


def render_message(message: ValidationMessage) -> None:
    html = message.to_html()
    if html:
        st.markdown(html, unsafe_allow_html=True)


def render_income_section(controller: FormController) -> None:
    st.subheader("💼 Income Information")
    st.markdown("Add every regular source of income.")

    sources = controller.state.data.income.sources
    if not sources:
        controller.add_income_source()
        st.rerun()

    for source in list(sources):
        binding = income_input_for(controller, source, is_only=len(sources) == 1)
        name_key = binding.element_id("name")
        amount_key = binding.element_id("amount")
        frequency_key = binding.element_id("frequency")

        col1, col2, col3 = st.columns([3, 2, 2])
        with col1:
            st.text_input(
                "Income Source Name",
                value=binding.name,
                key=name_key,
                placeholder="e.g., Salary, Freelance",
                on_change=lambda b=binding, k=name_key: b.set_name(st.session_state[k]),
            )
            render_message(binding.name_message())
        with col2:
            st.text_input(
                "Amount",
                value=binding.amount,
                key=amount_key,
                placeholder="0.00",
                on_change=lambda b=binding, k=amount_key: b.set_amount(st.session_state[k]),
            )
            render_message(binding.amount_message())
        with col3:
            options = list(IncomeFrequency)
            st.selectbox(
                "Frequency",
                options=options,
                index=options.index(binding.frequency),
                key=frequency_key,
                format_func=lambda f: f.value.replace("-", " ").capitalize(),
                on_change=lambda b=binding, k=frequency_key: b.set_frequency(st.session_state[k]),
            )

        if binding.show_remove:
            if st.button("Remove", key=f"remove-{source.id}"):
                binding.remove()
                st.session_state.income_inputs.pop(source.id, None)
                st.rerun()
        st.markdown("---")

    if st.button("➕ Add income source"):
        controller.add_income_source()
        st.rerun()

    st.markdown(f"**Total monthly income:** ${controller.state.data.income.total_monthly:,.2f}")


def render_expenses_section(controller: FormController) -> None:
    st.subheader("🧾 Expense Categories")
    st.markdown("Select the categories you spend money on.")

    expenses = controller.state.data.expenses
    for category in PREDEFINED_CATEGORIES:
        checked = st.checkbox(
            category,
            value=category in expenses.selected_categories,
            key=f"category-{category}",
        )
        if checked != (category in expenses.selected_categories):
            controller.toggle_expense_category(category)

    st.markdown("#### Custom categories")
    for category in list(expenses.custom_categories):
        col1, col2 = st.columns([4, 1])
        col1.markdown(f"- {category}")
        if col2.button("Remove", key=f"remove-custom-{category}"):
            controller.remove_custom_category(category)
            st.rerun()

    new_category = st.text_input("Add a custom category", key="custom-category")
    if st.button("➕ Add category"):
        result = validation_engine.validate("customCategory", new_category)
        if not result.is_valid:
            controller.set_error("customCategory", result.error)
        else:
            controller.clear_error("customCategory")
            controller.add_custom_category(new_category)
            st.rerun()
    render_message(ValidationMessage(
        controller.state.errors.get("customCategory"), id="custom-category-error"
    ))


def render_goals_section(controller: FormController) -> None:
    st.subheader("🎯 Financial Goals")
    st.markdown("What are you saving for?")

    goals = controller.state.data.goals
    if not goals:
        controller.add_goal()
        st.rerun()

    show_validation = default_show_validation()
    for goal in list(goals):
        col1, col2 = st.columns([3, 2])
        with col1:
            description = st.text_input(
                "Goal", value=goal.description, key=f"goal-description-{goal.id}",
                placeholder="e.g., Emergency fund",
            )
        with col2:
            target = st.number_input(
                "Target Amount", value=float(goal.target_amount), min_value=0.0, step=100.0,
                key=f"goal-target-{goal.id}",
            )
        if description.strip() != goal.description or target != goal.target_amount:
            controller.update_goal(goal.id, {"description": description.strip(), "target_amount": target})

        errors = [
            result.error
            for result in (
                validation_engine.validate("goal.description", description),
                validation_engine.validate("goal.targetAmount", target),
            )
            if not result.is_valid
        ]
        render_message(ValidationMessage(errors, id=f"goal-error-{goal.id}", visible=show_validation))

        if len(goals) > 1 and st.button("Remove", key=f"remove-goal-{goal.id}"):
            controller.remove_goal(goal.id)
            st.rerun()

    if st.button("➕ Add goal"):
        controller.add_goal()
        st.rerun()


def render_review_section(controller: FormController) -> None:
    st.subheader("✅ Review & Submit")
    data = controller.state.data

    st.markdown("**Income**")
    for source in data.income.sources:
        if source.is_complete:
            st.markdown(f"- {source.name}: ${source.amount:,.2f} ({source.frequency.value})")
    st.markdown(f"Total monthly: ${data.income.total_monthly:,.2f}")

    st.markdown("**Expenses**")
    st.markdown(", ".join(data.expenses.selected_categories + data.expenses.custom_categories) or "None")

    st.markdown("**Goals**")
    for goal in data.goals:
        if goal.is_complete:
            st.markdown(f"- {goal.description}: ${goal.target_amount:,.2f}")

    if st.button("Submit profile", type="primary", disabled=controller.completion_percentage < 100):
        controller.set_submitting(True)
        profile = controller.build_profile()
        st.session_state.submitted_profile = profile.model_dump(mode="json")
        controller.set_submitting(False)
        st.success("Your budget profile has been saved!")

    if st.session_state.get("submitted_profile"):
        with st.expander("Submitted profile"):
            st.json(st.session_state.submitted_profile)


def render_navigation(controller: FormController) -> None:
    col1, _, col3 = st.columns([1, 2, 1])
    with col1:
        if st.button("Previous", disabled=not controller.can_go_previous()):
            controller.navigate("previous")
            st.rerun()
    with col3:
        if st.button("Next", disabled=not controller.can_go_next()):
            controller.navigate("next")
            st.rerun()


def main():
    """Main application entry point."""
    controller = get_controller()

    st.title("💰 SaveSmart")
    st.markdown(ProgressIndicator(controller.state).render_html(), unsafe_allow_html=True)

    section = controller.current_section_id
    if section == "income":
        render_income_section(controller)
    elif section == "expenses":
        render_expenses_section(controller)
    elif section == "goals":
        render_goals_section(controller)
    else:
        render_review_section(controller)

    render_navigation(controller)

    with st.sidebar:
        st.markdown("### Sections")
        for index, item in enumerate(controller.state.sections):
            marker = "✅" if item.is_complete else "⬜"
            if st.button(f"{marker} {item.title}", key=f"section-{item.id}"):
                controller.go_to_section(index)
                st.rerun()
        st.markdown("---")
        if st.button("Start over"):
            controller.reset_form()
            st.session_state.income_inputs = {}
            st.rerun()


if __name__ == "__main__":
    main()
