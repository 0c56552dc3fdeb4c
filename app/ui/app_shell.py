from PyQt6.QtCore import QSettings
from PyQt6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QInputDialog,
    QListWidget,
    QMessageBox,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from app.controllers.profile_controller import ProfileController
from app.services.indicator import IndicatorState, IndicatorSynchronizer
from app.ui.panels.profile_picker import make_picker
from app.ui.status_indicator import QtIndicatorSink
from app.ui.theme import Colors, Styles
from app.ui.widget_utils import make_button, make_info_label
from app.workers.profile_workers import (
    CatalogFetchWorker,
    IndicatorRefreshWorker,
    ProfileResolveWorker,
    ProfileTaskWorker,
)
from core.profiles import parse_connection


class AppShell(QWidget):
    def __init__(self, app_state, profile_service, settings_store):
        super().__init__()

        self.settings = QSettings()
        self.app_state = app_state
        self.profile_service = profile_service
        self.picker_factory = make_picker
        self.workers = set()

        self.setWindowTitle("CPY Profiles")
        geometry = self.settings.value("ui/geometry")
        if geometry is not None:
            self.restoreGeometry(geometry)
        else:
            self.setGeometry(300, 300, 640, 360)

        # ---- widgets ----
        self.documents_list = QListWidget()
        self.documents_list.setStyleSheet(Styles.list_widget())
        self.documents_list.currentTextChanged.connect(self.on_document_selected)

        self.open_btn = make_button("Open Program…")
        self.close_btn = make_button("Close")
        self.resolve_btn = make_button("Resolve Profile")
        self.change_btn = make_button("Change Profile")
        self.new_profile_btn = make_button("New Profile…")
        self.default_btn = make_button("Set Default…")
        self.delete_btn = make_button("Delete Profile…")

        self.open_btn.clicked.connect(self.open_program)
        self.close_btn.clicked.connect(self.close_program)
        self.resolve_btn.clicked.connect(self.resolve_profile)
        self.change_btn.clicked.connect(self.change_default_profile)
        self.new_profile_btn.clicked.connect(self.create_profile)
        self.default_btn.clicked.connect(self.set_default_profile)
        self.delete_btn.clicked.connect(self.delete_profile)

        self.status_label = make_info_label("Idle")
        self.status_bar = QStatusBar()
        self.status_bar.setSizeGripEnabled(False)

        # ---- layouts ----
        document_buttons = QHBoxLayout()
        for button in [self.open_btn, self.close_btn, self.resolve_btn]:
            document_buttons.addWidget(button)

        profile_buttons = QHBoxLayout()
        for button in [
            self.change_btn,
            self.new_profile_btn,
            self.default_btn,
            self.delete_btn,
        ]:
            profile_buttons.addWidget(button)

        root_layout = QVBoxLayout()
        root_layout.addWidget(make_info_label("Open programs"))
        root_layout.addWidget(self.documents_list)
        root_layout.addLayout(document_buttons)
        root_layout.addLayout(profile_buttons)
        root_layout.addWidget(self.status_label)
        root_layout.addWidget(self.status_bar)
        self.setLayout(root_layout)

        # ---- profile indicator ----
        self.indicator_state = IndicatorState()
        self.indicator_sink = QtIndicatorSink(self.status_bar)
        self.indicator_sink.commandTriggered.connect(lambda _: self.change_default_profile())
        self.synchronizer = IndicatorSynchronizer(
            profile_service.catalog_provider,
            settings_store,
            self.indicator_state,
            self.indicator_sink,
        )
        self.controller = ProfileController(profile_service, self.synchronizer, app_state)
        self.refresh_indicator()

    def _start(self, worker):
        self.workers.add(worker)
        worker.finished.connect(lambda w=worker: self.workers.discard(w))
        worker.start()
        return worker

    def _run_task(self, action, *args, on_done=None):
        worker = ProfileTaskWorker(action, *args)
        worker.taskDone.connect(on_done or self.on_task_done)
        worker.taskFailed.connect(self.set_error)
        return self._start(worker)

    def _with_catalog(self, on_ready):
        worker = CatalogFetchWorker(self.controller)
        worker.catalogReady.connect(on_ready)
        worker.catalogFailed.connect(self.set_error)
        return self._start(worker)

    def _pick(self, catalog, default_name):
        success, selected, message = self.controller.pick_profile(
            self.picker_factory(self), catalog, default_name
        )
        if not success:
            self.set_status(message)
            return None
        return selected

    def refresh_indicator(self):
        worker = IndicatorRefreshWorker(self.synchronizer)
        worker.refreshFailed.connect(self.set_error)
        return self._start(worker)

    def set_status(self, text):
        self.status_label.setStyleSheet(Styles.info_label())
        self.status_label.setText(text)

    def set_error(self, text):
        self.status_label.setStyleSheet(Styles.info_label(Colors.WARN_FG))
        self.status_label.setText(text)

    def on_task_done(self, success, message):
        if success:
            self.set_status(message)
        else:
            self.set_error(message)

    def refresh_documents(self):
        self.documents_list.blockSignals(True)
        self.documents_list.clear()
        for doc in self.app_state.snapshot_documents():
            self.documents_list.addItem(doc.path)
        self.documents_list.blockSignals(False)

    def on_document_selected(self, path):
        if not path:
            return
        self.app_state.open_document(path)

    def open_program(self):
        paths, _ = QFileDialog.getOpenFileNames(
            self,
            "Open Program",
            "",
            "COBOL programs (*.cbl *.cob *.cobol *.CBL *.COB *.COBOL);;All files (*)",
        )
        for path in paths:
            self.app_state.open_document(path)
        if paths:
            self.refresh_documents()
            self.set_status(f"Active program: {self.app_state.active_program or 'none'}")

    def close_program(self):
        item = self.documents_list.currentItem()
        if item is None:
            return
        self.app_state.close_document(item.text())
        self.refresh_documents()

    def resolve_profile(self):
        program = self.app_state.active_program
        if not program:
            self.set_error("Open a program first.")
            return
        worker = ProfileResolveWorker(self.controller, program, self.app_state.snapshot_documents())
        worker.resolved.connect(lambda name, profile: self.set_status(f"{name} uses profile {profile}."))
        worker.notResolved.connect(self.on_profile_not_resolved)
        worker.resolveFailed.connect(self.set_error)
        self._start(worker)

    def on_profile_not_resolved(self, program):
        self.set_status(f"No profile found for {program}.")
        self.change_default_profile()

    # ---- change configured profile ----
    def change_default_profile(self):
        self._with_catalog(self.on_catalog_for_change)

    def on_catalog_for_change(self, catalog, default_name):
        selected = self._pick(catalog, default_name)
        if selected:
            self._run_task(self.controller.remember_profile, selected)

    # ---- default flag ----
    def set_default_profile(self):
        self._with_catalog(self.on_catalog_for_default)

    def on_catalog_for_default(self, catalog, default_name):
        selected = self._pick(catalog, default_name)
        if selected:
            self._run_task(self.controller.set_default_profile, selected)

    # ---- delete ----
    def delete_profile(self):
        self._with_catalog(self.on_catalog_for_delete)

    def on_catalog_for_delete(self, catalog, default_name):
        selected = self._pick(catalog, default_name)
        if not selected:
            return
        confirm = QMessageBox.question(
            self,
            "Delete Profile",
            f"Delete profile '{selected}'?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
        )
        if confirm != QMessageBox.StandardButton.Yes:
            return
        self._run_task(self.controller.delete_profile, selected)

    # ---- create ----
    def create_profile(self):
        name, ok = QInputDialog.getText(self, "New Profile", "Enter profile name:")
        if not ok or not name.strip():
            return
        connection, ok = QInputDialog.getText(self, "New Profile", "Connection (user@host:port):")
        if not ok:
            return
        user, host, port = parse_connection(connection)
        self._run_task(
            self.controller.create_profile,
            name.strip(),
            user,
            host,
            port,
            on_done=self.on_profile_created,
        )

    def on_profile_created(self, success, message):
        if not success:
            QMessageBox.warning(self, "New Profile", message)
            return
        self.set_status(message)
        self.refresh_indicator()

    def shutdown(self):
        """Wait for every worker to finish, then release the indicator."""
        for worker in list(self.workers):
            worker.wait()
        self.settings.setValue("ui/geometry", self.saveGeometry())
        self.synchronizer.dispose()
