"""Server-rendered page for the clothing swap UI."""

from html import escape

from ..models import SwapState
from .uploader import ImageUploader


TITLE = "AI Clothing Swap"
TAGLINE = "Upload a model and a clothing item to see the magic happen."
SWAP_LABEL = "Swap Clothing"
LOADING_LABEL = "Generating..."
WORKING_MESSAGE = "AI is working its magic..."
EMPTY_RESULT_MESSAGE = "Your generated image will appear here."

MODEL_UPLOADER = ImageUploader(id="model-uploader", title="Model Image", slot="model")
CLOTHING_UPLOADER = ImageUploader(id="clothing-uploader", title="Clothing Image", slot="clothing")


STYLE = """
body { margin: 0; min-height: 100vh; background: #111827; color: #f3f4f6;
       font-family: system-ui, sans-serif; display: flex; justify-content: center; }
.wrap { width: 100%; max-width: 64rem; padding: 2rem 1rem; }
header { text-align: center; margin-bottom: 2rem; }
h1 { font-size: 2.75rem; margin: 0; color: #e879f9; }
header p { color: #9ca3af; font-size: 1.1rem; }
.inputs { display: grid; grid-template-columns: repeat(auto-fit, minmax(18rem, 1fr)); gap: 2rem; }
.uploader-wrap { display: flex; flex-direction: column; align-items: center; gap: 1rem; }
.uploader-wrap h2 { font-size: 1.25rem; color: #d1d5db; margin: 0; }
.drop-target, .result { position: relative; width: 100%; aspect-ratio: 1 / 1; display: flex;
       align-items: center; justify-content: center; overflow: hidden; border-radius: 0.75rem;
       border: 2px dashed #374151; background: rgba(31, 41, 55, 0.5); }
.drop-target { cursor: pointer; }
.drop-target:hover { border-color: #ec4899; }
.drop-target img, .result img { width: 100%; height: 100%; object-fit: contain; }
.prompt, .placeholder { text-align: center; color: #6b7280; }
.icon { font-size: 2.5rem; }
.actions { display: flex; justify-content: center; margin: 2rem 0; }
#swap-button { padding: 1rem 2rem; font-size: 1.1rem; font-weight: bold; color: #fff; border: 0;
       border-radius: 0.4rem; background: linear-gradient(90deg, #9333ea, #db2777); cursor: pointer; }
#swap-button:disabled { opacity: 0.5; cursor: not-allowed; }
.error { color: #f87171; background: rgba(127, 29, 29, 0.5); padding: 0.75rem; border-radius: 0.4rem;
       text-align: center; }
.results h2 { text-align: center; color: #d1d5db; }
.spinner { display: inline-block; width: 2.5rem; height: 2.5rem; border-radius: 50%;
       border: 4px solid rgba(236, 72, 153, 0.25); border-top-color: #ec4899;
       animation: spin 1s linear infinite; }
@keyframes spin { to { transform: rotate(360deg); } }
"""

SCRIPT = """
async function uploadFile(slot, file) {
  const form = new FormData();
  form.append("files", file);
  await fetch(`/api/upload/${slot}`, { method: "POST", body: form });
  window.location.reload();
}

document.querySelectorAll(".drop-target").forEach((label) => {
  const input = document.getElementById(label.htmlFor);
  const slot = label.dataset.slot;
  const report = (files) => {
    if (files && files.length > 0) {
      uploadFile(slot, files[0]);
    }
  };
  input.addEventListener("change", (event) => report(event.target.files));
  label.addEventListener("dragover", (event) => {
    event.preventDefault();
    event.stopPropagation();
  });
  label.addEventListener("drop", (event) => {
    event.preventDefault();
    event.stopPropagation();
    report(event.dataTransfer.files);
  });
});

const swapButton = document.getElementById("swap-button");
swapButton.addEventListener("click", async () => {
  swapButton.disabled = true;
  swapButton.textContent = swapButton.dataset.loadingLabel;
  document.getElementById("result").innerHTML =
    `<div class="placeholder"><span class="spinner"></span><p>${swapButton.dataset.workingMessage}</p></div>`;
  await fetch("/api/swap", { method: "POST" });
  window.location.reload();
});
"""


def render_result(state: SwapState) -> str:
    """Render the result slot: spinner, generated image, or placeholder."""
    if state.is_loading:
        inner = (
            '<div class="placeholder"><span class="spinner"></span>'
            f'<p>{WORKING_MESSAGE}</p></div>'
        )
    elif state.result_image:
        inner = f'<img src="{escape(state.result_image)}" alt="Generated result"/>'
    else:
        inner = f'<div class="placeholder"><p>{EMPTY_RESULT_MESSAGE}</p></div>'
    return f'<div id="result" class="result">{inner}</div>'


def render_page(state: SwapState) -> str:
    """Render the whole page for the current state."""
    disabled = "" if state.can_swap else " disabled"
    label = LOADING_LABEL if state.is_loading else f"&#10024; {SWAP_LABEL}"
    error = f'<p class="error" role="alert">{escape(state.error)}</p>' if state.error else ""

    return f"""<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8"/>
    <meta name="viewport" content="width=device-width,initial-scale=1"/>
    <title>{TITLE}</title>
    <style>{STYLE}</style>
  </head>
  <body>
    <div class="wrap">
      <header>
        <h1>{TITLE}</h1>
        <p>{TAGLINE}</p>
      </header>
      <main>
        <div class="inputs">
          {MODEL_UPLOADER.render(state.model_image)}
          {CLOTHING_UPLOADER.render(state.clothing_image)}
        </div>
        <div class="actions">
          <button id="swap-button" type="button" data-loading-label="{LOADING_LABEL}"
                  data-working-message="{WORKING_MESSAGE}"{disabled}>{label}</button>
        </div>
        {error}
        <section class="results">
          <h2>Result</h2>
          {render_result(state)}
        </section>
      </main>
    </div>
    <script>{SCRIPT}</script>
  </body>
</html>
"""
