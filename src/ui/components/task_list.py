"""
Task list components.
"""

import streamlit as st

from src.core.models import Task, TaskCategory, TaskPriority
from src.ui.controller import AppController

_PRIORITIES = [p.value for p in TaskPriority]

_GROUPS = [
    ("Urgent", "urgent_tasks", "\U0001f6a8"),
    ("Later", "later_tasks", "\U0001f552"),
    ("Completed", "completed_tasks", "✅"),
]


def render_task_item(controller: AppController, task: Task) -> None:
    """Render one task with completion toggle, priority selector and delete."""
    completed = task.category == TaskCategory.completed

    with st.container(border=True):
        col1, col2, col3 = st.columns([6, 2, 1])
        with col1:
            done = st.checkbox(
                f"~~{task.text}~~" if completed else task.text,
                value=completed,
                key=f"toggle_{task.id}",
            )
            if done != completed:
                controller.toggle_task(task.id)
                st.rerun()
        with col2:
            priority = st.selectbox(
                "Priority",
                _PRIORITIES,
                index=_PRIORITIES.index(task.priority),
                format_func=str.title,
                key=f"priority_{task.id}",
                label_visibility="collapsed",
            )
            if priority != task.priority:
                controller.set_priority(task.id, priority)
                st.rerun()
        with col3:
            if st.button("\U0001f5d1", key=f"delete_task_{task.id}", help="Delete task"):
                controller.delete_task(task.id)
                st.rerun()


def render_task_groups(controller: AppController) -> None:
    """Render urgent, later and completed groups in list order."""
    state = controller.state
    if not state.tasks:
        st.info("No tasks yet. Record a voice memo to get started.")
        return

    for label, attr, icon in _GROUPS:
        tasks = getattr(state, attr)
        if not tasks:
            continue
        st.subheader(f"{icon} {label} ({len(tasks)})")
        for task in tasks:
            render_task_item(controller, task)
