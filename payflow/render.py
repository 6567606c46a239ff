from html import escape
from .models import CheckoutState

# background, text, border per status
PANEL_COLORS = {
    "success": ("#d4edda", "#155724", "#c3e6cb"),
    "error": ("#f8d7da", "#721c24", "#f5c6cb"),
    "pending": ("#fff3cd", "#856404", "#ffeaa7"),
    "processing": ("#d1ecf1", "#0c5460", "#bee5eb"),
}

PAGE = """<!doctype html>
<html lang="pt-BR">
<head>
<meta charset="utf-8">
<title>Sistema de Pagamento - Mercado Pago</title>
</head>
<body style="font-family: sans-serif; text-align: center">
<h1>Sistema de Pagamento - Mercado Pago</h1>
<h2>Processar Pagamento</h2>
<form method="post" action="{pay_action}" style="display: flex; flex-direction: column; gap: 12px; max-width: 400px; margin: 0 auto">
<input type="number" step="any" name="amount" placeholder="Valor em R$" value="{amount}"{disabled}>
<input type="email" name="payer_email" placeholder="Email do pagador" value="{payer_email}"{disabled}>
<button type="submit"{disabled}>{button_label}</button>
</form>
{panel}
{reset}
<p>Sistema de pagamento integrado com Mercado Pago</p>
</body>
</html>
"""


def render_result_panel(state: CheckoutState) -> str:
    result = state.result
    if result.status == "idle":
        return ""
    background, color, border = PANEL_COLORS[result.status]
    lines = [f"<div>{escape(result.message)}</div>"]
    if result.payment_id:
        lines.append(f'<div class="payment-id">ID do Pagamento: {escape(result.payment_id)}</div>')
    if result.status_detail:
        lines.append(f'<div class="status-detail">Status: {escape(result.status_detail)}</div>')
    return (
        f'<div id="result" class="{result.status}" style="max-width: 400px; margin: 16px auto; padding: 16px; '
        f'border-radius: 8px; background-color: {background}; color: {color}; border: 1px solid {border}">'
        + "".join(lines)
        + "</div>"
    )


def render_page(state: CheckoutState, pay_action: str = "/pay", reset_action: str = "/reset") -> str:
    processing = state.status == "processing"
    reset = ""
    if state.result.is_terminal:
        reset = f'<form method="post" action="{escape(reset_action)}"><button type="submit">Novo Pagamento</button></form>'
    return PAGE.format(
        pay_action=escape(pay_action),
        amount=escape(state.amount),
        payer_email=escape(state.payer_email),
        disabled=" disabled" if processing else "",
        button_label="Redirecionando..." if processing else "Pagar com Mercado Pago",
        panel=render_result_panel(state),
        reset=reset,
    )
