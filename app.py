import gradio as gr

from property_value_finder.config import get_settings
from property_value_finder.handlers import (
    READ_CLIPBOARD_JS,
    clear_handler,
    paste_handler,
    search_handler,
)
from property_value_finder.logging_config import configure_logging

settings = get_settings()
configure_logging(settings.log_level, settings.json_logs)

# --- UI Definition ---
with gr.Blocks(title=settings.app_name) as demo:
    gr.Markdown(f"# {settings.app_name}")
    gr.Markdown("Results are computed automatically as you type.")

    status_msg = gr.Markdown()
    result_display = gr.Textbox(label="Value", interactive=False)

    with gr.Row():
        prop_key = gr.Textbox(
            label="Property Key",
            value=settings.default_key,
            placeholder="e.g. eid or user.id",
        )

    with gr.Column():
        with gr.Row():
            paste_btn = gr.Button("Paste", variant="secondary", size="sm")
            clear_btn = gr.Button("Clear", variant="stop", size="sm")
        raw_input = gr.Textbox(
            label="Enter your data",
            placeholder="Paste your long string here...",
            lines=8,
            info="Paste your data and the result will appear automatically.",
        )

    raw_input.change(
        fn=search_handler,
        inputs=[raw_input, prop_key],
        outputs=[result_display, status_msg],
    )

    prop_key.change(
        fn=search_handler,
        inputs=[raw_input, prop_key],
        outputs=[result_display, status_msg],
    )

    paste_btn.click(
        fn=paste_handler,
        inputs=[raw_input],
        outputs=[raw_input, status_msg],
        js=READ_CLIPBOARD_JS,
    )

    clear_btn.click(
        fn=clear_handler,
        inputs=[],
        outputs=[raw_input, result_display, status_msg],
    )

if __name__ == "__main__":
    demo.launch(server_name=settings.server_name, server_port=settings.server_port)
