import logging
import os

import gradio as gr

from pointer_csv.handlers import (
    export_data_handler,
    export_header_handler,
    handle_root_change,
    load_and_parse_json_with_preview,
    preview_handler,
)
from pointer_csv.header import HeaderStyle
from pointer_csv.records import ROOT_LABEL

logging.basicConfig(
    level=os.getenv("POINTER_CSV_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

STYLE_CHOICES = [style.value for style in HeaderStyle]

# --- UI Definition ---
with gr.Blocks(title="Pointer CSV") as demo:
    gr.Markdown("# JSON to CSV")
    gr.Markdown("Upload a JSON (or JSON Lines) file and export its leaves as CSV columns keyed by JSON Pointer.")

    # State
    json_data_state = gr.State()

    with gr.Row():
        # Left Panel: Input
        with gr.Column(scale=1):
            gr.Markdown("### 1. Import")
            file_input = gr.File(label="Upload JSON File", file_types=[".json", ".jsonl"])
            status_msg = gr.Textbox(label="Status", interactive=False)
            root_selector = gr.Dropdown(
                label="Record Root (array pointer)",
                choices=[ROOT_LABEL],
                value=ROOT_LABEL,
                allow_custom_value=True,
                interactive=True,
            )
            document_count = gr.Textbox(label="Document Count", interactive=False)

        # Right Panel: Output Builder
        with gr.Column(scale=1):
            gr.Markdown("### 2. Output Builder")
            header_style = gr.Radio(choices=STYLE_CHOICES, value=HeaderStyle.POINTER.value, label="Header Style")
            transpose = gr.Checkbox(label="Transpose (one line per column)", value=False)
            header_template = gr.Textbox(
                label="Header Template (optional)",
                placeholder="/id\n/name\n/tags/0",
                lines=4,
                info="One JSON Pointer per line. Only these columns are exported.",
            )

            gr.Markdown("### 3. Export")
            output_filename = gr.Textbox(label="Output Filename (optional)", placeholder="output")
            with gr.Row():
                load_preview_btn = gr.Button("Load Preview")
                export_header_btn = gr.Button("Export Header Only")
                export_btn = gr.Button("Export CSV", variant="primary")
            download_output = gr.File(label="Download Result")
            preview = gr.Dataframe(label="Preview (first rows)", interactive=False)

    file_input.upload(
        fn=load_and_parse_json_with_preview,
        inputs=[file_input],
        outputs=[json_data_state, root_selector, status_msg, preview, document_count],
    )

    root_selector.change(
        fn=handle_root_change,
        inputs=[json_data_state, root_selector],
        outputs=[document_count, preview],
    )

    load_preview_btn.click(
        fn=preview_handler,
        inputs=[json_data_state, root_selector, header_style, transpose, header_template],
        outputs=[preview],
    )

    export_btn.click(
        fn=export_data_handler,
        inputs=[json_data_state, root_selector, header_style, transpose, header_template, output_filename],
        outputs=[download_output, status_msg],
    )

    export_header_btn.click(
        fn=export_header_handler,
        inputs=[header_style, header_template, output_filename],
        outputs=[download_output, status_msg],
    )

if __name__ == "__main__":
    demo.launch()
