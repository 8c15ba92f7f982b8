# scripts/create_token.py

import typer

from museum_cms.core.security import create_token, verify_token, warn_if_default_secret

cli = typer.Typer()


@cli.command()
def main(
    subject_id: str = typer.Argument(..., help="토큰에 담을 주체 식별자 (예: 관리자 계정 ID)"),
    check: bool = typer.Option(False, "--check", "-c", help="발급 직후 토큰을 검증하여 클레임을 출력합니다."),
):
    """
    Museum CMS API의 보호된 엔드포인트를 호출할 때 쓸 Bearer 토큰을 발급합니다.
    """
    warn_if_default_secret()
    token = create_token(subject_id)
    typer.echo(token)

    if check:
        claims = verify_token(token)
        if claims is None:
            typer.echo("오류: 방금 발급한 토큰을 검증하지 못했습니다.", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"claims: {claims}", err=True)


if __name__ == "__main__":
    cli()
