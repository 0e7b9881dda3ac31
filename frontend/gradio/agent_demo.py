# frontend/gradio/agent_demo.py
"""
Gradio demo for the web research agent
"""

import sys
from pathlib import Path

import gradio as gr
import requests

ROOT_DIR = Path(__file__).resolve().parents[2]
sys.path.append(str(ROOT_DIR))

from frontend.gradio.stream_client import (
    API_BASE,
    render_conversation,
    render_run_log,
    stream_run,
)


def list_available_tools():
    """List all available agent tools"""
    try:
        response = requests.get(f"{API_BASE}/agent/tools", timeout=30)
        response.raise_for_status()
    except requests.RequestException as e:
        return f"Error: {e}"

    tools = response.json().get("tools", [])
    if not tools:
        return "No tools available"
    return "\n\n".join(
        f"**{tool['name']}**\n{tool['description']} `{tool.get('usage', '')}`"
        for tool in tools
    )


def run_goal(goal: str, steps: float):
    """Stream a run into the conversation and run log panels"""
    if not goal.strip():
        yield "Please enter a goal", ""
        return

    try:
        for entries in stream_run(goal.strip(), int(steps)):
            yield render_conversation(entries), render_run_log(entries)
    except requests.RequestException as e:
        yield f"Error: {e}", ""


# Create Gradio interface
with gr.Blocks(title="Web Agent Demo", theme=gr.themes.Soft()) as app:
    gr.Markdown("# 🤖 Web Agent Demo")
    gr.Markdown("Give the agent a goal and watch it search, read and answer")

    with gr.Row():
        with gr.Column(scale=1):
            goal_input = gr.Textbox(
                label="Goal",
                placeholder="Summarize the latest release notes of Python",
                lines=3,
            )
            steps_input = gr.Slider(
                label="Max Steps", minimum=1, maximum=20, value=6, step=1
            )
            run_btn = gr.Button("Run Agent", variant="primary")

            with gr.Accordion("🛠️ Available Tools", open=False):
                tools_btn = gr.Button("Refresh Tool List")
                tools_output = gr.Markdown("")

        with gr.Column(scale=2):
            gr.Markdown("### Conversation")
            conversation_output = gr.Markdown("")
            gr.Markdown("### Run log")
            run_log_output = gr.Markdown("")

    run_btn.click(
        fn=run_goal,
        inputs=[goal_input, steps_input],
        outputs=[conversation_output, run_log_output],
    )
    tools_btn.click(fn=list_available_tools, outputs=tools_output)

if __name__ == "__main__":
    app.launch(server_name="0.0.0.0", server_port=7860, share=False)
