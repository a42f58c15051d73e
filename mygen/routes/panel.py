from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from mygen.services.preview import preview_frame

router = APIRouter()


PANEL_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>MyGen</title>
    <style>
        :root {{
            --black: #0f0f0f;
            --white: #ffffff;
            --accent: #2563eb;
            --gray: #1f1f1f;
        }}
        * {{ box-sizing: border-box; }}
        body {{
            margin: 0;
            font-family: 'Inter', system-ui, sans-serif;
            background: var(--black);
            color: var(--white);
            height: 100vh;
        }}
        .hidden {{ display: none !important; }}
        .panel-container {{
            max-width: 760px;
            margin: 0 auto;
            padding: 120px 20px 40px;
            text-align: center;
        }}
        .main-heading {{ font-size: clamp(2.2rem,4vw,3.4rem); margin-bottom: 8px; }}
        .sub-heading {{ color: rgba(255,255,255,0.7); margin-bottom: 32px; }}
        .input-section {{ display: flex; gap: 10px; }}
        .input-section.bottom {{ margin-top: auto; }}
        .prompt-input {{
            flex: 1;
            padding: 14px;
            border-radius: 16px;
            border: 1px solid rgba(255,255,255,0.2);
            background: #131313;
            color: var(--white);
        }}
        .generate-button {{
            padding: 12px 20px;
            border: none;
            border-radius: 16px;
            background: var(--accent);
            color: var(--white);
            font-weight: 600;
            cursor: pointer;
        }}
        .generate-button:disabled {{ opacity: 0.5; cursor: not-allowed; }}
        .split-layout {{ display: flex; height: 100vh; }}
        .left-split {{
            width: 32%;
            display: flex;
            flex-direction: column;
            padding: 24px;
            border-right: 1px solid rgba(255,255,255,0.1);
        }}
        .status-text {{ color: rgba(255,255,255,0.8); }}
        .right-split {{ flex: 1; display: flex; flex-direction: column; padding: 16px; min-width: 0; }}
        .top-buttons {{ display: flex; gap: 8px; margin-bottom: 12px; }}
        .code-tab, .copy-button, .download-button {{
            padding: 8px 16px;
            border-radius: 999px;
            border: 1px solid rgba(255,255,255,0.2);
            background: transparent;
            color: var(--white);
            cursor: pointer;
        }}
        .code-tab.active {{ background: var(--accent); border-color: var(--accent); }}
        .copy-button {{ margin-left: auto; }}
        .copy-button.copied {{ border-color: #10b981; color: #10b981; }}
        .preview-box {{
            flex: 1;
            height: 100%;
            overflow: hidden;
            background: #131313;
            border: 1px solid rgba(255,255,255,0.08);
            border-radius: 16px;
        }}
        .code-scroll {{ height: 100%; overflow: auto; padding: 16px; }}
        .code-scroll pre {{ margin: 0; white-space: pre-wrap; font-size: 0.85rem; }}
        .website-preview {{ width: 100%; height: 100%; border: none; background: var(--white); }}
        .error {{ color: #f87171; }}
    </style>
</head>
<body>
    <div class="panel-container" id="initialLayout">
        <h1 class="main-heading">Build, Any Web Application</h1>
        <p class="sub-heading">With Your 24/7 MyGen</p>
        <div class="input-section">
            <input type="text" class="prompt-input" data-prompt placeholder="What do you want to build? (e.g., Swiggy clone)" />
            <button class="generate-button" data-generate disabled>&#10148; Generate</button>
        </div>
    </div>

    <div class="split-layout hidden" id="splitLayout">
        <div class="left-split">
            <div class="status-message">
                <p class="status-text" id="statusText"></p>
            </div>
            <div class="input-section bottom">
                <input type="text" class="prompt-input" data-prompt placeholder="What do you want to build?" />
                <button class="generate-button" data-generate disabled>&#10148; Generate</button>
            </div>
        </div>
        <div class="right-split">
            <div class="top-buttons">
                <button class="code-tab" data-tab="HTML">HTML</button>
                <button class="code-tab" data-tab="CSS">CSS</button>
                <button class="code-tab" data-tab="JS">JS</button>
                <button class="code-tab active" data-tab="Preview">Preview</button>
                <button class="copy-button hidden" id="copyButton">Copy</button>
                <button class="download-button" id="downloadButton">Download</button>
            </div>
            <div class="preview-box">
                <div class="code-scroll hidden" id="codeScroll"><pre id="codeView"></pre></div>
                {preview_frame}
            </div>
        </div>
    </div>

    <script>
        const CODE_TABS = ['HTML', 'CSS', 'JS'];
        const state = {{
            prompt: '',
            lastPrompt: '',
            code: {{ html: '', css: '', js: '' }},
            activeTab: 'Preview',
            showSplitLayout: false,
            copied: false,
            loading: false,
            error: '',
        }};

        const promptInputs = document.querySelectorAll('[data-prompt]');
        const generateButtons = document.querySelectorAll('[data-generate]');

        function render() {{
            document.getElementById('initialLayout').classList.toggle('hidden', state.showSplitLayout);
            document.getElementById('splitLayout').classList.toggle('hidden', !state.showSplitLayout);

            promptInputs.forEach(input => {{
                if (input.value !== state.prompt) input.value = state.prompt;
                input.disabled = state.loading;
            }});
            generateButtons.forEach(button => {{
                button.disabled = !state.prompt.trim() || state.loading;
                button.textContent = state.loading ? 'Generating...' : '\\u27A4 Generate';
            }});

            const status = document.getElementById('statusText');
            status.classList.toggle('error', Boolean(state.error));
            if (state.error) {{
                status.textContent = state.error;
            }} else if (state.loading && state.lastPrompt) {{
                status.textContent = 'Creating your Web Application ...';
            }} else if (state.lastPrompt) {{
                status.textContent = 'Your Website is Ready \\u2705';
            }} else {{
                status.textContent = '';
            }}

            document.querySelectorAll('[data-tab]').forEach(tab => {{
                tab.classList.toggle('active', tab.dataset.tab === state.activeTab);
            }});

            const isCodeTab = CODE_TABS.includes(state.activeTab);
            const copyButton = document.getElementById('copyButton');
            copyButton.classList.toggle('hidden', !isCodeTab);
            copyButton.classList.toggle('copied', state.copied);
            copyButton.textContent = state.copied ? '\\u2713 Copied!' : 'Copy';

            document.getElementById('codeScroll').classList.toggle('hidden', !isCodeTab);
            document.getElementById('previewFrame').classList.toggle('hidden', isCodeTab);
            if (isCodeTab) {{
                document.getElementById('codeView').textContent = state.code[state.activeTab.toLowerCase()];
            }}
        }}

        async function postJSON(url, body) {{
            const response = await fetch(url, {{
                method: 'POST',
                headers: {{ 'Content-Type': 'application/json' }},
                body: JSON.stringify(body),
            }});
            if (!response.ok) throw new Error('Request failed: ' + response.status);
            return response;
        }}

        async function refreshPreview() {{
            const response = await postJSON('/api/preview', state.code);
            document.getElementById('previewFrame').srcdoc = await response.text();
        }}

        async function handleSubmit() {{
            if (!state.prompt.trim() || state.loading) return;
            state.showSplitLayout = true;
            state.loading = true;
            state.lastPrompt = state.prompt;
            state.error = '';
            render();

            try {{
                const generated = await (await postJSON('/api/openai/generate', {{ prompt: state.prompt }})).json();
                state.code = await (await postJSON('/api/extract', {{ code: generated.code }})).json();
                await refreshPreview();
            }} catch (error) {{
                console.error('Failed to generate code.', error);
                state.error = 'Failed to generate code.';
            }}

            state.loading = false;
            state.prompt = '';
            render();
        }}

        function handleCopy() {{
            const textToCopy = state.code[state.activeTab.toLowerCase()];
            if (!textToCopy) return;
            navigator.clipboard.writeText(textToCopy).then(() => {{
                state.copied = true;
                render();
                setTimeout(() => {{ state.copied = false; render(); }}, 2000);
            }});
        }}

        async function handleDownload() {{
            const response = await postJSON('/api/download', state.code);
            const url = URL.createObjectURL(await response.blob());
            const link = document.createElement('a');
            link.href = url;
            link.download = 'mygen-site.zip';
            link.click();
            URL.revokeObjectURL(url);
        }}

        promptInputs.forEach(input => {{
            input.addEventListener('input', e => {{ state.prompt = e.target.value; render(); }});
            input.addEventListener('keydown', e => {{ if (e.key === 'Enter') handleSubmit(); }});
        }});
        generateButtons.forEach(button => button.addEventListener('click', handleSubmit));
        document.querySelectorAll('[data-tab]').forEach(tab => {{
            tab.addEventListener('click', () => {{ state.activeTab = tab.dataset.tab; render(); }});
        }});
        document.getElementById('copyButton').addEventListener('click', handleCopy);
        document.getElementById('downloadButton').addEventListener('click', handleDownload);

        render();
    </script>
</body>
</html>
"""


def render_panel() -> str:
    return PANEL_TEMPLATE.format(preview_frame=preview_frame())


@router.get("/", response_class=HTMLResponse)
async def main_panel() -> HTMLResponse:
    return HTMLResponse(render_panel())
