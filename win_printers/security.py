from fastapi import Header, HTTPException
from win_printers import env


def verify_agent_token(x_agent_token: str = Header(...)):
    if not env.PRINT_AGENT_TOKEN:
        raise HTTPException(
            status_code=500,
            detail="PRINT_AGENT_TOKEN no configurado en el agente"
        )

    if x_agent_token != env.PRINT_AGENT_TOKEN:
        raise HTTPException(
            status_code=401,
            detail="Token del agente inválido"
        )
