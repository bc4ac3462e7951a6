from __future__ import annotations

from collections.abc import Callable, Iterator

from textual import on
from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal, Vertical, VerticalScroll
from textual.widget import Widget
from textual.widgets import (
    Button,
    Footer,
    Header,
    Input,
    Label,
    Markdown,
    Static,
    TextArea,
)
from textual.worker import Worker, WorkerState

from resume_builder.forms import (
    PERSONAL_FIELDS,
    SECTION_FORMS,
    SKILLS_FIELD,
    SUMMARY_FIELD,
    FormField,
    event_for,
    field_id,
    parse_field_id,
    read_value,
)
from resume_builder.models.chat import UnsupportedFileError
from resume_builder.models.resume import ResumeRecord
from resume_builder.preview import render_preview
from resume_builder.services.assistant import (
    AssistantBusyError,
    AssistantSession,
    CompletionOutcome,
    CompletionRequest,
    OutcomeKind,
)
from resume_builder.services.resume_editor import EntryAdded, EntryRemoved, ResumeStore
from resume_builder.tui_rendering import render_preview_markdown, render_transcript_markdown
from resume_builder.utils import (
    export_filename,
    export_resume_to,
    prompt_export_location,
    prompt_for_resume_file,
)

_ASSISTANT_CONTROLS = ("#btn-upload", "#btn-analyze", "#btn-feedback", "#btn-send", "#chat-input")


class ResumeBuilderTUI(App[None]):
    """Resume editor, live preview, and AI assistant in one screen."""

    TITLE = "AI Resume Builder"

    BINDINGS = [
        ("ctrl+e", "export('pdf')", "Export PDF"),
        ("ctrl+q", "quit", "Quit"),
    ]

    CSS = """
Screen {
    layout: vertical;
    background: $background;
}

#middle {
    height: 1fr;
    layout: horizontal;
}

#editor-pane {
    width: 1fr;
    border: heavy $primary;
    background: $panel;
    padding: 0 1;
}

#right-pane {
    width: 1fr;
    layout: vertical;
}

#preview-container {
    height: 1fr;
    border: heavy $primary;
    background: $surface;
}

#assistant {
    height: 1fr;
    border: heavy $primary;
    background: $panel;
    padding: 0 1;
}

#transcript-container {
    height: 1fr;
}

.section-title {
    text-style: bold;
    color: $accent;
    margin-top: 1;
}

.entry-card {
    height: auto;
    border: round $secondary;
    padding: 0 1;
    margin-bottom: 1;
}

.resume-field {
    margin-bottom: 1;
}

TextArea.resume-field {
    height: 5;
}

#assistant-actions, #export-actions, #chat-row {
    height: auto;
}

#assistant-actions Button, #export-actions Button {
    margin-right: 1;
}

#chat-input {
    width: 1fr;
}

#statusbar {
    height: auto;
    padding: 0 1;
    background: $panel;
    color: $text;
}
"""

    def __init__(
        self,
        store: ResumeStore | None = None,
        session: AssistantSession | None = None,
    ) -> None:
        super().__init__()
        self._store = store or ResumeStore()
        self._session = session or AssistantSession(self._store)
        self._worker: Worker[CompletionOutcome] | None = None
        self._unsubscribe: Callable[[], None] | None = None

    # ---------------------------------------------------------------------
    # LAYOUT
    # ---------------------------------------------------------------------

    def _field_widgets(
        self,
        form_field: FormField,
        value: str,
        section: str | None = None,
        index: int | None = None,
    ) -> Iterator[Widget]:
        widget_id = field_id(form_field.name, section, index)
        yield Label(form_field.label)
        if form_field.multiline:
            yield TextArea(
                value,
                id=widget_id,
                classes="resume-field",
                language=None,
                placeholder=form_field.placeholder,
            )
        else:
            yield Input(
                value=value,
                placeholder=form_field.placeholder,
                id=widget_id,
                classes="resume-field",
            )

    def _entry_cards(self, section: str) -> list[Vertical]:
        form = SECTION_FORMS[section]
        cards: list[Vertical] = []
        for index, entry in enumerate(getattr(self._store.record, section)):
            children: list[Widget] = [Static(f"{form.title} #{index + 1}")]
            for form_field in form.fields:
                children.extend(
                    self._field_widgets(form_field, getattr(entry, form_field.name), section, index)
                )
            children.append(
                Button(
                    "Remove",
                    id=f"remove-{section}-{index}",
                    classes="remove-entry",
                    variant="error",
                )
            )
            cards.append(Vertical(*children, classes="entry-card"))
        return cards

    def _editor_widgets(self) -> Iterator[Widget]:
        record = self._store.record

        yield Static("Personal Details", classes="section-title")
        for form_field in PERSONAL_FIELDS:
            yield from self._field_widgets(form_field, getattr(record, form_field.name))

        yield Static("Professional Summary", classes="section-title")
        yield from self._field_widgets(SUMMARY_FIELD, record.summary)

        for section, form in SECTION_FORMS.items():
            yield Static(form.title, classes="section-title")
            yield Vertical(*self._entry_cards(section), id=f"section-{section}")
            yield Button(form.add_label, id=f"add-{section}", classes="add-entry")

        yield Static("Skills", classes="section-title")
        yield from self._field_widgets(SKILLS_FIELD, record.skills)

        yield Horizontal(
            Button("Export PDF", id="btn-export-pdf", classes="export-btn", variant="primary"),
            Button("Export DOCX", id="btn-export-docx", classes="export-btn"),
            id="export-actions",
        )

    def compose(self) -> ComposeResult:
        yield Header()

        yield Container(
            VerticalScroll(*self._editor_widgets(), id="editor-pane"),
            Container(
                VerticalScroll(Markdown("", id="preview"), id="preview-container"),
                Container(
                    VerticalScroll(Markdown("", id="transcript"), id="transcript-container"),
                    Label("", id="selected-file"),
                    Horizontal(
                        Button("Upload Resume", id="btn-upload", variant="success"),
                        Button("Analyze Uploaded", id="btn-analyze", variant="primary"),
                        Button("Get Feedback", id="btn-feedback", variant="primary"),
                        id="assistant-actions",
                    ),
                    Horizontal(
                        Input(placeholder="Ask a general question...", id="chat-input"),
                        Button("Send", id="btn-send"),
                        id="chat-row",
                    ),
                    id="assistant",
                ),
                id="right-pane",
            ),
            id="middle",
        )

        yield Container(Label("Ready.", id="status"), id="statusbar")
        yield Footer()

    def on_mount(self) -> None:
        self._unsubscribe = self._store.subscribe(self._on_record_changed)
        self._refresh_preview(self._store.record)
        self._refresh_transcript()
        self._set_assistant_busy(False)

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()

    # ---------------------------------------------------------------------
    # RENDERING
    # ---------------------------------------------------------------------

    def _on_record_changed(self, record: ResumeRecord) -> None:
        self._refresh_preview(record)

    def _refresh_preview(self, record: ResumeRecord) -> None:
        preview = self.query_one("#preview", Markdown)
        preview.update(render_preview_markdown(render_preview(record)))

    def _refresh_transcript(self) -> None:
        transcript = self.query_one("#transcript", Markdown)
        transcript.update(
            render_transcript_markdown(self._session.transcript, self._session.is_waiting)
        )
        self.query_one("#transcript-container", VerticalScroll).scroll_end(animate=False)

    def _set_assistant_busy(self, busy: bool) -> None:
        for selector in _ASSISTANT_CONTROLS:
            self.query_one(selector).disabled = busy
        if self._session.selected_file is None:
            self.query_one("#btn-analyze", Button).disabled = True

    # ---------------------------------------------------------------------
    # EDITOR EVENTS
    # ---------------------------------------------------------------------

    def _apply_change(self, widget_id: str | None, value: str) -> None:
        address = parse_field_id(widget_id)
        if address is None:
            return
        # Rebuilt widgets echo their initial value, and removed ones may still
        # deliver a late event; neither should touch the record.
        current = read_value(self._store.record, address)
        if current is None or current == value:
            return
        self._store.dispatch(event_for(address, value))

    @on(Input.Changed, ".resume-field")
    def handle_input_changed(self, event: Input.Changed) -> None:
        self._apply_change(event.input.id, event.value)

    @on(TextArea.Changed, ".resume-field")
    def handle_text_area_changed(self, event: TextArea.Changed) -> None:
        self._apply_change(event.text_area.id, event.text_area.text)

    async def _rebuild_section(self, section: str) -> None:
        container = self.query_one(f"#section-{section}", Vertical)
        await container.remove_children()
        await container.mount_all(self._entry_cards(section))

    @on(Button.Pressed, ".add-entry")
    async def handle_add_entry(self, event: Button.Pressed) -> None:
        section = (event.button.id or "").removeprefix("add-")
        self._store.dispatch(EntryAdded(section))
        await self._rebuild_section(section)

    @on(Button.Pressed, ".remove-entry")
    async def handle_remove_entry(self, event: Button.Pressed) -> None:
        _, section, index = (event.button.id or "").split("-", 2)
        # A repeated press can arrive after its card is already gone.
        if int(index) >= len(getattr(self._store.record, section)):
            return
        self._store.dispatch(EntryRemoved(section, int(index)))
        await self._rebuild_section(section)

    # ---------------------------------------------------------------------
    # EXPORT
    # ---------------------------------------------------------------------

    @on(Button.Pressed, ".export-btn")
    def handle_export(self, event: Button.Pressed) -> None:
        export_format = (event.button.id or "").removeprefix("btn-export-")
        self.action_export(export_format)

    def action_export(self, export_format: str = "pdf") -> None:
        status = self.query_one("#status", Label)
        record = self._store.record

        selected = prompt_export_location(export_filename(record, export_format))
        if selected is None:
            status.update("Export cancelled.")
            return

        try:
            path = export_resume_to(record, selected, export_format)
        except Exception as exc:  # pragma: no cover - surfaced to the user
            status.update(f"Export failed: {exc}")
            return
        status.update(f"Exported to {path}")

    # ---------------------------------------------------------------------
    # ASSISTANT EVENTS
    # ---------------------------------------------------------------------

    def _start_request(self, begin: Callable[[], CompletionRequest | None]) -> None:
        status = self.query_one("#status", Label)
        try:
            request = begin()
        except AssistantBusyError as exc:
            status.update(str(exc))
            return

        self._refresh_transcript()
        if request is None:
            return

        def work() -> CompletionOutcome:
            return self._session.complete(request)

        self._set_assistant_busy(True)
        self._refresh_transcript()
        status.update("Waiting for the assistant...")
        self._worker = self.run_worker(
            work, name="assistant", exclusive=True, thread=True, exit_on_error=False
        )

    @on(Button.Pressed, "#btn-send")
    @on(Input.Submitted, "#chat-input")
    def handle_send_message(self) -> None:
        chat_input = self.query_one("#chat-input", Input)
        text = chat_input.value
        if not text.strip():
            return
        self._start_request(lambda: self._session.begin_user_message(text))
        chat_input.value = ""

    @on(Button.Pressed, "#btn-feedback")
    def handle_get_feedback(self) -> None:
        self._start_request(self._session.begin_feedback)

    @on(Button.Pressed, "#btn-upload")
    def handle_upload(self) -> None:
        status = self.query_one("#status", Label)
        selected = prompt_for_resume_file()
        if selected is None:
            status.update("No file selected.")
            return

        try:
            self._session.select_file(selected)
        except UnsupportedFileError as exc:
            status.update(str(exc))
            return

        self.query_one("#selected-file", Label).update(f"Selected: {selected.name}")
        self.query_one("#btn-analyze", Button).disabled = False
        status.update("File selected. Press 'Analyze Uploaded' to review it.")

    @on(Button.Pressed, "#btn-analyze")
    def handle_analyze_file(self) -> None:
        self._start_request(self._session.begin_file_analysis)

    # ---------------------------------------------------------------------
    # WORKER STATE HANDLER
    # ---------------------------------------------------------------------

    @on(Worker.StateChanged)
    def worker_state(self, event: Worker.StateChanged) -> None:
        if event.worker is not self._worker:
            return

        status = self.query_one("#status", Label)

        if event.state == WorkerState.SUCCESS:
            outcome = event.worker.result
            self._session.resolve(outcome)
            status.update("Ready." if outcome.ok else "The assistant request failed.")
        elif event.state in (WorkerState.ERROR, WorkerState.CANCELLED):
            # complete() maps provider failures itself; this covers the worker dying.
            message = str(event.worker.error or "Request cancelled.")
            self._session.resolve(CompletionOutcome(OutcomeKind.TRANSPORT_ERROR, message))
            status.update(f"Error: {message}")
        else:
            return

        self._worker = None
        self._set_assistant_busy(False)
        self._refresh_transcript()


def main(store: ResumeStore | None = None) -> None:
    ResumeBuilderTUI(store).run()
