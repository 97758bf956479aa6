"""PASA V60 브루잉 시뮬레이터 Gradio 앱"""
from __future__ import annotations
import html
import logging
from typing import Optional

import gradio as gr
from PIL import Image

from best_score import browser_tracker
from brew_metrics.hints import SLIDERS, suggest_adjustments
from brew_metrics.scoring import ScoreBreakdown
from brew_session import BrewSession
from brew_utils import format_value, slider_fill_percent
from config import BASELINE_TIPS, BROWSER_STORAGE_KEY, SETTINGS
from messaging import INTERESTS, LeadForm, build_deep_link, can_send_lead, lead_message
from notifications import ToastChannel
from recipe import DEFAULT_RECIPE, FIELDS, clamp_recipe
from ui.radar import generate_radar_image

logging.basicConfig(level=logging.INFO, format="%(message)s")
logger = logging.getLogger("v60_brew")

TOASTS = ToastChannel(
    sink=lambda message, duration: gr.Info(message, duration=duration),
    duration=SETTINGS.toast_duration,
)

CSS = """
body{background:#0f0e0c;}
.v60-link{display:inline-block;padding:10px 16px;border-radius:9999px;font-weight:600;text-decoration:none;}
.v60-link[aria-disabled='true']{opacity:.45;pointer-events:none;}
"""


def _link(label: str, href: Optional[str], background: str) -> str:
    disabled = href is None
    href_attr = f"href='{html.escape(href, quote=True)}'" if href else ""
    return (
        f"<a class='v60-link' {href_attr} target='_blank' rel='noreferrer' "
        f"aria-disabled='{'true' if disabled else 'false'}' "
        f"style='background:{background};color:#111;'>{html.escape(label)}</a>"
    )


def render_recipe_summary(session: BrewSession) -> str:
    rows = []
    for spec in SLIDERS:
        value = getattr(session.recipe, spec.field)
        pct = slider_fill_percent(spec.field, value)
        rows.append(
            f"""
            <div style='display:flex;align-items:center;gap:10px;font-size:13px;'>
              <div style='width:120px;color:#bbb;'>{spec.label}</div>
              <div style='flex:1;height:8px;border-radius:9999px;background:#2a2622;overflow:hidden;'>
                <div style='height:100%;width:{pct}%;background:#C98C4C;'></div>
              </div>
              <code style='width:60px;text-align:right;'>{format_value(spec.field, value)}</code>
            </div>
            """
        )
    return "<div style='display:flex;flex-direction:column;gap:6px;'>" + "".join(rows) + "</div>"


def render_score_card(session: BrewSession) -> str:
    if not session.revealed:
        return """
        <div style='display:flex;flex-direction:column;gap:4px;'>
          <div style='font-size:12px;letter-spacing:.1em;text-transform:uppercase;color:#999;'>Result</div>
          <div style='font-size:14px;color:#bbb;'>Hidden — adjust your settings, then click <b>Show your result</b>.</div>
          <div style='font-size:12px;color:#888;'>Tip: changing any slider hides the result until you reveal again.</div>
        </div>
        """
    score = session.score
    best = "—" if session.best is None else str(session.best)
    return f"""
    <div style='display:flex;flex-direction:column;gap:6px;'>
      <div style='font-size:12px;letter-spacing:.1em;text-transform:uppercase;color:#999;'>Result</div>
      <div style='font-size:32px;font-weight:700;font-family:serif;'>{score} <span style='font-size:15px;font-weight:400;color:#999;'>/ 1000</span></div>
      <div style='height:10px;border-radius:9999px;background:#2a2622;overflow:hidden;'>
        <div style='height:100%;width:{score / 10:.1f}%;background:linear-gradient(90deg,#C98C4C,#3EA76A);transition:width 0.2s;'></div>
      </div>
      <div style='font-size:12px;color:#999;'>Best: <b>{best}</b></div>
    </div>
    """


def render_hints(session: BrewSession, breakdown: ScoreBreakdown) -> str:
    if not session.revealed:
        return ""
    suggestions = suggest_adjustments(session.recipe, breakdown)
    if not suggestions:
        return "<div style='font-size:13px;color:#3EA76A;'>Every variable is in the sweet spot. Perfect cup!</div>"
    items = "".join(
        f"<li><b>{s.label}</b>: {s.direction} <span style='color:#999;'>(−{s.lost_points:.0f} pts)</span></li>"
        for s in suggestions
    )
    return f"<div><b>Where you are losing points</b><ul style='margin:4px 0 0;padding-left:18px;font-size:13px;'>{items}</ul></div>"


def render_action_links(session: BrewSession) -> str:
    share_href = session.share_link(SETTINGS.whatsapp_number, SETTINGS.whatsapp_base_url)
    cta_href = build_deep_link(SETTINGS.whatsapp_number, session.cta_message(), SETTINGS.whatsapp_base_url)
    return (
        "<div style='display:flex;flex-wrap:wrap;gap:10px;justify-content:flex-end;'>"
        + _link("Share on WhatsApp", share_href, "#E9DCC9")
        + _link("Message PASA on WhatsApp", cta_href, "#3EA76A")
        + "</div>"
    )


def render_tips_panel() -> str:
    items = "".join(f"<li>{tip}</li>" for tip in BASELINE_TIPS)
    return f"""
    <div style='display:flex;flex-direction:column;gap:8px;'>
      <div style='font-weight:700;font-family:serif;'>Tips</div>
      <ul style='margin:0;padding-left:18px;font-size:13px;color:#bbb;'>{items}</ul>
    </div>
    """


def log_score(breakdown: ScoreBreakdown):
    logger.info(
        "[정보] 점수 갱신: 비율 1:%.2f → %.0f점, 합계 %d점",
        breakdown.ratio_value,
        breakdown.ratio,
        breakdown.score,
    )


def pack_session_outputs(session: BrewSession):
    breakdown = session.breakdown
    log_score(breakdown)
    radar: Optional[Image.Image] = generate_radar_image(breakdown) if session.revealed else None
    return (
        session,
        render_recipe_summary(session),
        render_score_card(session),
        radar,
        render_hints(session, breakdown),
        render_action_links(session),
        gr.update(visible=not session.revealed),
        gr.update(interactive=session.revealed),
    )


def on_slider_change(name: str, value: float, session: BrewSession):
    return pack_session_outputs(session.update(name, value))


def slider_handler(name: str):
    def handler(value: float, session: BrewSession):
        return on_slider_change(name, value, session)

    return handler


def on_reveal(session: BrewSession):
    return pack_session_outputs(session.reveal())


def on_save(session: BrewSession, browser_data: Optional[dict]):
    # 최고 점수는 브라우저별 저장소(gr.BrowserState)에만 남긴다
    tracker = browser_tracker(browser_data)
    if not session.revealed:
        gr.Warning("Reveal your result before saving.")
        return (*pack_session_outputs(session), tracker.snapshot())
    try:
        session = session.save_best(tracker, TOASTS)
    except RuntimeError as exc:
        logger.warning("[경고] 최고 점수 저장 실패: %s", exc)
        gr.Warning("Could not save your best score. Please try again.")
    return (*pack_session_outputs(session), tracker.snapshot())


def on_load(session: BrewSession, browser_data: Optional[dict]):
    best = browser_tracker(browser_data).load()
    session = BrewSession(recipe=clamp_recipe(session.recipe), revealed=session.revealed, best=best)
    return pack_session_outputs(session)


def on_lead_change(
    name: str,
    interest: str,
    phone: str,
    note: str,
    session: BrewSession,
    browser_data: Optional[dict] = None,
):
    form = LeadForm(name=name or "", interest=interest or INTERESTS[0], phone=phone or "", note=note or "")
    best = session.best if session.best is not None else browser_tracker(browser_data).load()
    message = lead_message(form, best)
    href = build_deep_link(SETTINGS.whatsapp_number, message, SETTINGS.whatsapp_base_url) if can_send_lead(form) else None
    return message, _link("Send on WhatsApp", href, "#3EA76A")


def build_ui() -> gr.Blocks:
    with gr.Blocks(title="PASA V60 Brewing Game", css=CSS) as demo:
        gr.Markdown("""
        ### Practice • Tune • Share
        # V60 Brewing Simulator
        Adjust your variables, reveal your score, then message PASA Coffee on WhatsApp for training and gear.
        """)
        initial = BrewSession(recipe=DEFAULT_RECIPE)
        session_state = gr.State(initial)
        browser_state = gr.BrowserState({}, storage_key=BROWSER_STORAGE_KEY)

        sliders = {}
        with gr.Row():
            with gr.Column(scale=1):
                for spec in SLIDERS:
                    sliders[spec.field] = gr.Slider(
                        spec.minimum,
                        spec.maximum,
                        value=getattr(DEFAULT_RECIPE, spec.field),
                        step=spec.step,
                        label=spec.label,
                        info=spec.hint,
                    )
            with gr.Column(scale=1):
                summary_out = gr.HTML(label="Recipe")
                score_out = gr.HTML(label="Result")
                with gr.Row():
                    reveal_btn = gr.Button("Show your result", variant="primary")
                    save_btn = gr.Button("Save & Share", variant="primary", interactive=False)
                links_out = gr.HTML(label="WhatsApp")
                radar_out = gr.Image(label="Score breakdown", image_mode="RGBA", interactive=False)
                hints_out = gr.HTML(label="Hints")
        gr.HTML(render_tips_panel(), label="Tips")

        with gr.Accordion("Chat / Enquiry", open=False):
            gr.Markdown("#### PASA Coffee — Chat")
            name_box = gr.Textbox(label="Name *", placeholder="Your full name", max_lines=1)
            interest_dd = gr.Dropdown(choices=list(INTERESTS), value=INTERESTS[0], label="What are you interested in?")
            phone_box = gr.Textbox(label="Phone (optional)", placeholder="05xxxxxxxx", max_lines=1)
            note_box = gr.Textbox(label="Note (optional)", placeholder="Tell us more…", lines=3)
            preview_out = gr.Textbox(label="Preview message", lines=6, interactive=False)
            send_out = gr.HTML()
            gr.Markdown("We open WhatsApp with this message. Nothing is stored on our servers; your best score stays in this browser.")

        # 초기 렌더링
        (
            _,
            summary_out.value,
            score_out.value,
            radar_out.value,
            hints_out.value,
            links_out.value,
            _,
            _,
        ) = pack_session_outputs(initial)
        preview_out.value, send_out.value = on_lead_change("", INTERESTS[0], "", "", initial)

        # 이벤트 연결
        session_outputs = [session_state, summary_out, score_out, radar_out, hints_out, links_out, reveal_btn, save_btn]
        for field in FIELDS:
            sliders[field].input(
                fn=slider_handler(field),
                inputs=[sliders[field], session_state],
                outputs=session_outputs,
                trigger_mode="always_last",
            )
        reveal_btn.click(fn=on_reveal, inputs=[session_state], outputs=session_outputs)
        lead_inputs = [name_box, interest_dd, phone_box, note_box, session_state, browser_state]
        lead_outputs = [preview_out, send_out]
        save_btn.click(fn=on_save, inputs=[session_state, browser_state], outputs=[*session_outputs, browser_state]).then(
            fn=on_lead_change, inputs=lead_inputs, outputs=lead_outputs
        )
        demo.load(fn=on_load, inputs=[session_state, browser_state], outputs=session_outputs).then(
            fn=on_lead_change, inputs=lead_inputs, outputs=lead_outputs
        )

        for component in (name_box, interest_dd, phone_box, note_box):
            component.change(fn=on_lead_change, inputs=lead_inputs, outputs=lead_outputs)

    return demo


if __name__ == "__main__":
    if not SETTINGS.whatsapp_number:
        logger.warning("[경고] WHATSAPP_NUMBER 가 비어 있어. 링크가 번호 없이 만들어져.")
    print("Gradio 앱을 시작할게. 브라우저에서 확인해줘.")
    app = build_ui()
    app.launch()
