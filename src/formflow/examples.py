"""
Example schema builder for demos and tests.

Builds a three-screen event signup form: contact details, preferences,
then a confirmation screen that shows static text and closes the flow.
"""
from formflow.model import (
    ChoiceComponent,
    ComponentType,
    InputComponent,
    Schema,
    Screen,
    StaticComponent,
)


def build_example_signup_schema() -> Schema:
    contact = Screen(
        id="contact",
        title="Your details",
        components=[
            StaticComponent(type=ComponentType.HEADING, text="Event signup"),
            InputComponent(type=ComponentType.INPUT, name="full name", label="Full name", required=True),
            InputComponent(type=ComponentType.INPUT, name="email", label="Email address", required=True),
            InputComponent(type=ComponentType.DATE, name="arrival", label="Arrival date"),
        ],
    )

    preferences = Screen(
        id="preferences",
        title="Preferences",
        components=[
            ChoiceComponent(
                type=ComponentType.RADIO,
                name="ticket",
                label="Ticket type",
                options=["Day Pass", "Full Weekend"],
                required=True,
            ),
            ChoiceComponent(
                type=ComponentType.CHECKBOX,
                name="workshops",
                label="Workshops you would like to attend",
                options=["Intro to Python", "Data Pipelines", "Testing"],
            ),
            ChoiceComponent(
                type=ComponentType.DROPDOWN,
                name="diet",
                label="Dietary needs",
                options=["None", "Vegetarian", "Vegan"],
            ),
            InputComponent(type=ComponentType.TEXTAREA, name="notes", label="Anything else?"),
        ],
    )

    confirm = Screen(
        id="confirm",
        title="Confirm",
        components=[
            StaticComponent(type=ComponentType.SUBHEADING, text="Almost done"),
            StaticComponent(type=ComponentType.TEXT, text="Press Done to submit your signup."),
            StaticComponent(type=ComponentType.CAPTION, text="You can change your answers later."),
        ],
    )

    return Schema(screens=[contact, preferences, confirm])
