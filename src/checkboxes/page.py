"""Demo page served at ``/``."""
from __future__ import annotations

from flask import render_template_string

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Checkbox Manager</title>
    <style>
        body { font-family: Arial, sans-serif; margin: 0; padding: 20px; }
        #checkboxes { display: grid; grid-template-columns: repeat(auto-fill, minmax(100px, 1fr)); gap: 10px; }
        .checkbox { display: flex; align-items: center; }
        #count { margin-top: 20px; font-weight: bold; }
    </style>
</head>
<body>
    <h1>Checkbox Manager</h1>
    <p>Showing {{ demo_count }} of {{ capacity }} checkboxes.</p>
    <div id="checkboxes"></div>
    <div id="count"></div>

    <script>
        const DEMO_COUNT = {{ demo_count }};
        const POLL_INTERVAL_MS = {{ poll_interval_ms }};
        const checkboxesContainer = document.getElementById('checkboxes');
        const countElement = document.getElementById('count');

        function createCheckboxes(num) {
            for (let i = 0; i < num; i++) {
                const checkbox = document.createElement('div');
                checkbox.className = 'checkbox';
                checkbox.innerHTML = '<input type="checkbox" id="cb' + i + '"><label for="cb' + i + '">' + i + '</label>';
                checkbox.querySelector('input').addEventListener('change', () => toggleCheckbox(i));
                checkboxesContainer.appendChild(checkbox);
            }
        }

        function toggleCheckbox(index) {
            fetch('/toggle?index=' + index)
                .then(response => response.text())
                .then(() => updateCount());
        }

        function updateCount() {
            fetch('/count')
                .then(response => response.text())
                .then(count => {
                    countElement.textContent = 'Checked boxes: ' + count;
                });
        }

        function updateState() {
            fetch('/state')
                .then(response => response.json())
                .then(state => {
                    for (let i = 0; i < DEMO_COUNT && i < state.length; i++) {
                        document.getElementById('cb' + i).checked = state[i];
                    }
                    updateCount();
                });
        }

        createCheckboxes(DEMO_COUNT);
        updateState();
        setInterval(updateState, POLL_INTERVAL_MS);
    </script>
</body>
</html>
"""


def render_page(demo_count: int, poll_interval_ms: int, capacity: int | None = None) -> str:
    """Render the demo page; requires a Flask application context."""
    if capacity is None:
        capacity = demo_count
    return render_template_string(
        PAGE_TEMPLATE,
        demo_count=min(demo_count, capacity),
        capacity=capacity,
        poll_interval_ms=poll_interval_ms,
    )
